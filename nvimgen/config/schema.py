# nvimgen Configuration Schema
# Pydantic models for YAML configuration validation

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class UploadFormat(str, Enum):
    """Body encoding used when pushing a file to the listener."""

    MULTIPART = "multipart"
    JSON = "json"


class ListenerConfig(BaseModel):
    """Connection settings for the companion listener inside Neovim."""

    host: str = Field(default="127.0.0.1", description="Listener host")
    port: int = Field(default=45831, description="Listener TCP port")
    token: str | None = Field(default=None, description="Bearer token, if the listener requires one")
    timeout: float = Field(default=5.0, description="Request timeout in seconds")
    upload: UploadFormat = Field(default=UploadFormat.MULTIPART, description="Upload body format")

    @field_validator("port")
    @classmethod
    def valid_port(cls, v: int) -> int:
        """Ensure the port is a usable TCP port."""
        if not 0 < v < 65536:
            raise ValueError(f"Port must be between 1 and 65535, got {v}")
        return v

    @field_validator("timeout")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


class DeliveryConfig(BaseModel):
    """Local file delivery settings."""

    output_path: str = Field(default="~/.config/nvim/init.lua", description="Default target for saved configs")
    backup: bool = Field(default=True, description="Back up an existing file before overwriting")
    directory_state: str = Field(
        default="~/.config/nvimgen/directory.yaml", description="Where the connected directory is remembered"
    )

    @field_validator("output_path", "directory_state")
    @classmethod
    def expand_paths(cls, v: str) -> str:
        """Expand ~ in paths."""
        return str(Path(v).expanduser())


class ShareConfig(BaseModel):
    """Shareable link settings."""

    base_url: str = Field(default="http://localhost:5173/", description="Base URL shareable links point to")

    @field_validator("base_url")
    @classmethod
    def http_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v


class OutputConfig(BaseModel):
    """Console output configuration."""

    verbose: bool = Field(default=False, description="Enable verbose output")
    colored: bool = Field(default=True, description="Enable colored output")


class NvimgenConfig(BaseModel):
    """Root configuration model for nvimgen."""

    listener: ListenerConfig = Field(default_factory=ListenerConfig, description="Companion listener settings")
    delivery: DeliveryConfig = Field(default_factory=DeliveryConfig, description="File delivery settings")
    share: ShareConfig = Field(default_factory=ShareConfig, description="Shareable link settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")
