"""Configuration dataclasses for File Sync."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
from enum import Enum

from file_sync.exceptions import ConfigError


# Seconds a source file must be newer than its counterpart before it is copied
DEFAULT_PROPAGATION_MARGIN = 2.0


class Platform(Enum):
    """Host platform, used for filesystem semantics."""
    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "darwin"
    AUTO = "auto"


@dataclass
class SyncConfig:
    """Configuration for one synchronized folder pair.

    Attributes:
        source: Root whose changes are always mirrored
        destination: Root that receives the changes (and feeds back in two-way mode)
        ignore_patterns: Glob patterns ("*", "?") matched against full paths
        two_way: Default mode used when start() is called without a flag
        case_sensitive: Root prefix matching; None follows the host filesystem
        propagation_margin: Seconds a file must be newer to overwrite its counterpart
    """
    source: Path
    destination: Path
    ignore_patterns: List[str] = field(default_factory=list)
    two_way: bool = False
    case_sensitive: Optional[bool] = None
    propagation_margin: float = DEFAULT_PROPAGATION_MARGIN

    def __post_init__(self):
        """Ensure roots are Path objects and values are usable."""
        if isinstance(self.source, str):
            self.source = Path(self.source)
        if isinstance(self.destination, str):
            self.destination = Path(self.destination)
        if isinstance(self.ignore_patterns, str):
            self.ignore_patterns = [self.ignore_patterns]
        else:
            self.ignore_patterns = list(self.ignore_patterns)
        if self.propagation_margin < 0:
            raise ConfigError(
                f"propagation_margin must not be negative: {self.propagation_margin}"
            )


@dataclass
class LogConfig:
    """Logging options for the command line front end.

    Attributes:
        level: Logging level name or number
        json_output: Emit JSON lines instead of text
        log_file: Also write log records to this file
    """
    level: Union[int, str] = "INFO"
    json_output: bool = False
    log_file: Optional[Path] = None

    def __post_init__(self):
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)


def config_from_dict(data: Dict[str, Any]) -> Tuple[SyncConfig, LogConfig]:
    """Build configuration objects from a parsed JSON document.

    Args:
        data: Mapping with "source", "destination" and optional
              "ignore", "two_way", "case_sensitive", "propagation_margin"
              and "logging" keys

    Returns:
        Tuple of (SyncConfig, LogConfig)

    Raises:
        ConfigError: If required keys are missing or values are invalid
    """
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    missing = [key for key in ("source", "destination") if not data.get(key)]
    if missing:
        raise ConfigError(f"Missing required config keys: {', '.join(missing)}")

    try:
        sync_config = SyncConfig(
            source=Path(data["source"]),
            destination=Path(data["destination"]),
            ignore_patterns=data.get("ignore", []),
            two_way=bool(data.get("two_way", False)),
            case_sensitive=data.get("case_sensitive"),
            propagation_margin=float(
                data.get("propagation_margin", DEFAULT_PROPAGATION_MARGIN)
            ),
        )
    except ConfigError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid sync configuration: {e}") from e

    logging_data = data.get("logging") or {}
    log_config = LogConfig(
        level=logging_data.get("level", "INFO"),
        json_output=bool(logging_data.get("json", False)),
        log_file=logging_data.get("file"),
    )

    return sync_config, log_config


def load_config(path: Union[str, Path]) -> Tuple[SyncConfig, LogConfig]:
    """Load configuration from a JSON file.

    Args:
        path: Path to the JSON config file

    Returns:
        Tuple of (SyncConfig, LogConfig)

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to load config {path}: {e}") from e

    return config_from_dict(data)
