"""Data models for pullem."""

from .repository import LocalBranch, RepositoryContext, RepositoryResult, RepositoryStatus

__all__ = ["LocalBranch", "RepositoryContext", "RepositoryResult", "RepositoryStatus"]
