"""Configuration management for scrollport."""

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Configuration for scrollport."""

    high_performance_rendering: bool = False
    mouse_wheel_lines: int = 3
    log_file: Optional[str] = None  # Textual owns the terminal, so logs go to a file
    log_level: str = "WARNING"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the config file."""
        config_dir = Path.home() / ".config" / "scrollport"
        return config_dir / "config.json"

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create default."""
        config_path = cls.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    data = json.load(f)
                return cls(**data)
            except (json.JSONDecodeError, TypeError) as e:
                logger.warning(f"Could not load config: {e}. Using defaults.")
                return cls.default()
        else:
            config = cls.default()
            config.save()
            logger.info(f"Wrote default config to {config_path}")
            return config

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls()

    def save(self) -> None:
        """Save configuration to file."""
        config_path = self.get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w') as f:
            json.dump(asdict(self), f, indent=2)

    def validated(self) -> "Config":
        """Return a copy with out-of-range values replaced by usable ones."""
        wheel_lines = self.mouse_wheel_lines
        if not isinstance(wheel_lines, int) or wheel_lines < 1:
            logger.warning(f"Invalid mouse_wheel_lines {wheel_lines!r}, using 1")
            wheel_lines = 1

        log_level = str(self.log_level).upper()
        if log_level not in LOG_LEVELS:
            logger.warning(f"Unknown log_level {self.log_level!r}, using WARNING")
            log_level = "WARNING"

        return replace(self, mouse_wheel_lines=wheel_lines, log_level=log_level)
