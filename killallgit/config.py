"""Configuration handling for killallgit"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from killallgit.constants import PROTECTED_ENV_VAR


def parse_protected_list(value: Optional[str]) -> List[str]:
    """Split a comma-separated name list, trimming whitespace and dropping empties."""
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


@dataclass
class Config:
    """Configuration for a single killallgit invocation."""

    # Extra protected branch names (the built-in set is always applied)
    protected_branches: List[str] = field(default_factory=list)

    # Execution modes
    force: bool = False
    dry_run: bool = False
    json_output: bool = False
    verbose: bool = False
    debug: bool = False
    interactive: bool = False  # stdin is attached to a terminal

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_protected_branches()
        self._validate_output_mode()

    def _validate_protected_branches(self):
        """Validate protected_branches list."""
        if not isinstance(self.protected_branches, list):
            raise ValueError("protected_branches must be a list")
        self.protected_branches = [name.strip() for name in self.protected_branches if name.strip()]

    def _validate_output_mode(self):
        """JSON output is only produced as a dry-run preview."""
        if self.json_output and not self.dry_run:
            raise ValueError("json_output requires dry_run")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **kwargs) -> "Config":
        """Create Config, reading the protected-name override from the environment once."""
        if environ is None:
            environ = os.environ
        protected = parse_protected_list(environ.get(PROTECTED_ENV_VAR))
        return cls(protected_branches=protected, **kwargs)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "protected_branches": self.protected_branches,
            "force": self.force,
            "dry_run": self.dry_run,
            "json_output": self.json_output,
            "verbose": self.verbose,
            "debug": self.debug,
            "interactive": self.interactive,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "protected_branches",
            "force",
            "dry_run",
            "json_output",
            "verbose",
            "debug",
            "interactive",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
