"""Configuration handling for pullem"""

from dataclasses import dataclass, field
from typing import List

from pullem.constants import DEFAULT_PROTECTED_BRANCHES, DEFAULT_REMOTE


@dataclass
class Config:
    """Configuration for a pullem run with validation."""

    # Branch pruning
    prune: bool = False
    protected_branches: List[str] = field(default_factory=lambda: list(DEFAULT_PROTECTED_BRANCHES))

    # Remote pulled from
    remote_name: str = DEFAULT_REMOTE

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_remote_name()
        self._validate_protected_branches()

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()

    def _validate_protected_branches(self):
        """Validate protected_branches list."""
        if not isinstance(self.protected_branches, list):
            raise ValueError("protected_branches must be a list")
        self.protected_branches = [name.strip() for name in self.protected_branches if name.strip()]

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "prune": self.prune,
            "protected_branches": self.protected_branches,
            "remote_name": self.remote_name,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key so a Config and a plain dict read alike."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {"prune", "protected_branches", "remote_name", "verbose", "debug"}

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
