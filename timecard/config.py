"""Configuration loading for timecard.

Settings live in ``~/.config/timecard/config.toml``:

    [database]
    path = "~/.config/timecard/timecard.db"

    [report]
    memo_width = 20
    with_memos = false
    precision = 2
    strict = false

    [logging]
    level = "WARNING"

``TIMECARD_CONFIG`` points at another config file and ``TIMECARD_DB``
overrides the database path.
"""

import os
from pathlib import Path
from typing import Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError

from timecard.constants import MAX_MEMO_WIDTH
from timecard.errors import ConfigError

CONFIG_DIR = Path.home() / ".config" / "timecard"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_DB_PATH = CONFIG_DIR / "timecard.db"

CONFIG_ENV_VAR = "TIMECARD_CONFIG"
DB_ENV_VAR = "TIMECARD_DB"


class DatabaseConfig(BaseModel):
    """Database settings."""

    path: Path = Field(default=DEFAULT_DB_PATH, description="SQLite database file")

    model_config = {"frozen": True}


class ReportConfig(BaseModel):
    """Weekly report defaults."""

    memo_width: int = Field(default=MAX_MEMO_WIDTH, ge=1, description="Memo wrap width")
    with_memos: bool = Field(default=False, description="Include memo rows")
    precision: Optional[int] = Field(
        default=None, ge=0, description="Fixed decimals for hours"
    )
    strict: bool = Field(default=False, description="Fail on unparseable entries")

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="WARNING")

    model_config = {"frozen": True}


class TimecardConfig(BaseModel):
    """Complete timecard configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}


def get_config_path() -> Path:
    """Path of the config file, honouring TIMECARD_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(config_path: Optional[Path] = None) -> TimecardConfig:
    """Load configuration.

    A missing file yields the defaults. TIMECARD_DB, when set, replaces
    the database path from the file.

    Args:
        config_path: Explicit config file; defaults to get_config_path().

    Raises:
        ConfigError: If the file exists but is not valid TOML or has
            invalid values.
    """
    path = config_path or get_config_path()

    data: dict = {}
    if path.exists():
        try:
            data = toml.load(path)
        except (OSError, toml.TomlDecodeError) as e:
            raise ConfigError(f"Could not read {path}: {e}") from e

    db_override = os.environ.get(DB_ENV_VAR)
    if db_override:
        data.setdefault("database", {})["path"] = db_override

    try:
        config = TimecardConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    db_path = config.database.path.expanduser()
    return config.model_copy(
        update={"database": DatabaseConfig(path=db_path)}
    )
