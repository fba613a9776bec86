"""Profile management for recipebook log output."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_FALSE_VALUES = {"0", "false", "no", "off"}


class Profile:
    """Manages profile-specific paths for recipebook.

    A profile determines where recipebook writes its logs. The active profile
    is determined by the RECIPEBOOK_PROFILE environment variable, defaulting
    to "default" if not set. Recipes themselves are never written to disk.
    """

    def __init__(self, name: Optional[str] = None, home: Optional[Path] = None):
        """Initialize profile with given name or from environment.

        Args:
            name: Profile name. If None, uses RECIPEBOOK_PROFILE env var or "default".
            home: Root for all profiles. If None, uses RECIPEBOOK_HOME or ~/.recipebook.
        """
        self.name = name or os.getenv("RECIPEBOOK_PROFILE", "default")
        self._home = Path(home) if home else self._find_home()
        self._data_root = self._home / self.name

    def _find_home(self) -> Path:
        """Resolve the root directory that holds every profile."""
        configured = os.getenv("RECIPEBOOK_HOME")
        if configured:
            return Path(configured).expanduser()
        return Path.home() / ".recipebook"

    def ensure_directories(self) -> None:
        """Create profile directories if they don't exist."""
        self.data_root.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    @property
    def data_root(self) -> Path:
        """Root directory for profile data."""
        return self._data_root

    @property
    def logs_dir(self) -> Path:
        """Directory for log files."""
        return self._data_root / "logs"

    @property
    def log_file(self) -> Path:
        """Path to the main recipebook log file."""
        return self.logs_dir / "recipebook.log"

    @property
    def log_level(self) -> str:
        """Level for the stderr log sink."""
        return os.getenv("RECIPEBOOK_LOG_LEVEL", "ERROR").upper()

    @property
    def file_logging(self) -> bool:
        """Whether logs are also written to the profile's log file."""
        return os.getenv("RECIPEBOOK_LOG_TO_FILE", "1").strip().lower() not in _FALSE_VALUES

    @classmethod
    def current(cls) -> "Profile":
        """Get the current active profile.

        Returns:
            Profile instance for the current profile.
        """
        return cls()

    def __str__(self) -> str:
        """String representation of profile."""
        return f"Profile({self.name})"

    def __repr__(self) -> str:
        """Developer representation of profile."""
        return f"Profile(name={self.name!r}, data_root={self._data_root!s})"
