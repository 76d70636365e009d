"""Core functionality for pullem."""

from .walker import TreeWalker, Visitor
from .updater import RepositoryUpdater

__all__ = ["TreeWalker", "Visitor", "RepositoryUpdater"]
