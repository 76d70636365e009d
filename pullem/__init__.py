"""
pullem - fast-forward every git checkout under a directory tree
"""

from .__version__ import __version__
from .core import RepositoryUpdater, TreeWalker
from .cli.main import main

__all__ = ["RepositoryUpdater", "TreeWalker", "main", "__version__"]
