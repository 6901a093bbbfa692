import os
from dataclasses import dataclass
from pathlib import Path

# ────────────────────────────────────────────────────────────────────────────
# Files & formats
# ────────────────────────────────────────────────────────────────────────────
DATA_FILE = "recordbook.pkl"
LOG_FILE = "recordbook.log"
DATE_FORMAT = "%d-%m-%Y"
DATE_FORMAT_HINT = "DD-MM-YYYY"

# Largest index a user may type; anything above is reported as invalid
MAX_INDEX = 2 ** 31 - 1

HOME_ENV = "RECORDBOOK_HOME"
LOG_LEVEL_ENV = "RECORDBOOK_LOG_LEVEL"
DEFAULT_HOME = "data"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the console front end."""

    data_dir: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def data_file(self) -> Path:
        return self.data_dir / DATA_FILE

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"

    @classmethod
    def from_env(cls, data_dir=None, log_level=None) -> "Settings":
        """Explicit arguments win over environment variables, which win over defaults."""
        home = data_dir or os.environ.get(HOME_ENV) or DEFAULT_HOME
        level = log_level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
        return cls(data_dir=Path(home), log_level=level.upper())
