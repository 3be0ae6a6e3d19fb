"""Centralized application configuration."""

import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from torctl.control.transport import DEFAULT_ADDRESS

DEFAULT_DATA_DIR = Path.home() / ".local" / "torctl"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Config(BaseModel):
    """Application-wide configuration."""

    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(description="Base directory for config and log files")
    address: str = Field(default=DEFAULT_ADDRESS, min_length=1, description="Control port as host:port")
    password: str = Field(default="", description="Control port password (empty = no credential)")
    timeout: float = Field(default=10.0, gt=0, description="Socket timeout in seconds")
    log_level: LogLevel = Field(default="DEBUG", description="Minimum level written to the log file")

    @computed_field(description="Optional TOML configuration file")
    @property
    def config_path(self) -> Path:
        """Optional TOML configuration file."""
        return self.data_dir / "config.toml"

    @computed_field(description="Log file")
    @property
    def log_path(self) -> Path:
        """Log file."""
        return self.data_dir / "torctl.log"

    @staticmethod
    def build(data_dir: Path | None = None, address: str | None = None, password: str | None = None) -> "Config":
        """Build a Config from defaults, optional config.toml, and explicit overrides."""
        resolved_dir = data_dir if data_dir is not None else DEFAULT_DATA_DIR
        config_path = resolved_dir / "config.toml"

        kwargs: dict[str, Any] = {"data_dir": resolved_dir}
        if config_path.is_file():
            with config_path.open("rb") as f:
                toml_data = tomllib.load(f)
            if isinstance(toml_data.get("address"), str):
                kwargs["address"] = toml_data["address"]
            if isinstance(toml_data.get("password"), str):
                kwargs["password"] = toml_data["password"]
            if isinstance(toml_data.get("log_level"), str):
                kwargs["log_level"] = toml_data["log_level"].upper()
            if isinstance(toml_data.get("timeout"), int | float):
                kwargs["timeout"] = toml_data["timeout"]

        if address:
            kwargs["address"] = address
        if password is not None:
            kwargs["password"] = password

        return Config(**kwargs)
