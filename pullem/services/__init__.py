"""Services used by the repository updater."""

from .git_service import GitService
from .display_service import DisplayService

__all__ = ["GitService", "DisplayService"]
