"""Repository model and related enums"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class RepositoryStatus(Enum):
    """Outcome of processing one repository."""
    UPDATED = "updated"
    FAILED = "failed processing"
    NOT_ON_DEFAULT = "not on default branch"
    NOT_CLEAN = "not clean"
    FAST_FORWARD_FAILED = "fast forwarding not possible"

    @property
    def succeeded(self) -> bool:
        return self is RepositoryStatus.UPDATED


@dataclass
class RepositoryContext:
    """State gathered for a repository while it is being processed."""
    path: str
    relative_path: str
    default_branch: str
    current_ref: Optional[str] = None  # None = detached HEAD


@dataclass
class LocalBranch:
    """A local branch and the upstream it tracks."""
    name: str
    upstream: str = ""  # Empty = no upstream configured

    @property
    def has_upstream(self) -> bool:
        return bool(self.upstream)


@dataclass
class RepositoryResult:
    """Reported outcome for a repository."""
    relative_path: str
    status: RepositoryStatus
    detail: Optional[str] = None  # Underlying error text for FAILED
