"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import ClassVar, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from heatindex.constants import AIR_TEMP_MIN_C, DEW_TEMP_MIN_C, RELATIVE_HUMIDITY_MIN

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class HeatIndexSettings(BaseModel):
    """Settings for query validation and logging.

    The limits default to the range in which the heat index regression is
    meaningful; they can be overridden in config.yaml.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/heatindex/config.yaml").expanduser(),
        Path("/etc/heatindex/config.yaml"),
    ]

    # Validation limits
    air_temp_min_c: float = Field(
        AIR_TEMP_MIN_C, description="Lowest accepted air temperature (deg C)"
    )
    dew_temp_min_c: float = Field(
        DEW_TEMP_MIN_C, description="Lowest accepted dewpoint temperature (deg C)"
    )
    relative_humidity_min: float = Field(
        RELATIVE_HUMIDITY_MIN,
        ge=0.0,
        le=100.0,
        description="Lowest accepted relative humidity (%)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def logging_level(self) -> int:
        """Numeric logging level for ``logging.basicConfig``."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def load(cls, path: Path | None = None) -> HeatIndexSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated HeatIndexSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("HEATINDEX_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from HEATINDEX_CONFIG not found: {path}")
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set HEATINDEX_CONFIG."
                    )
        elif not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> HeatIndexSettings:
        """Load configuration, falling back to defaults when no file exists.

        An explicitly given ``path``, or one named by HEATINDEX_CONFIG, must exist.
        """
        try:
            return cls.load(path)
        except FileNotFoundError:
            if path is not None or os.environ.get("HEATINDEX_CONFIG"):
                raise
            return cls()
