"""Configuration schema using Pydantic.

Single data model and defaults for the server, persisted to ~/.rpcgate/config.json.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings


class ServerConfig(BaseModel):
    """HTTP listener configuration."""
    host: str = "127.0.0.1"
    port: int = 8000
    path: str = "/"  # Route that accepts GET and POST JSON-RPC requests


class ProtocolConfig(BaseModel):
    """JSON-RPC protocol selection; applies to every request of the process."""
    version: Literal["1.0", "2.0"] = "2.0"


class DispatchConfig(BaseModel):
    """Dispatch behavior."""
    # Report a method that raises as InternalError instead of MethodNotFound.
    split_invocation_errors: bool = False
    # Reject deferred results that do not settle in time (None = wait forever).
    pending_timeout_seconds: float | None = Field(default=None, gt=0)


class LoggingConfig(BaseModel):
    """Loguru sink configuration."""
    level: str = "INFO"
    file_enabled: bool = True
    rotation: str = "10 MB"
    retention: str = "14 days"


class Config(BaseSettings):
    """Root configuration for rpcgate."""
    server: ServerConfig = Field(default_factory=ServerConfig)
    protocol: ProtocolConfig = Field(default_factory=ProtocolConfig)
    dispatch: DispatchConfig = Field(default_factory=DispatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    service: str = ""  # Service module (dotted name or ./path); the CLI argument wins

    model_config = ConfigDict(
        env_prefix="RPCGATE_",
        env_nested_delimiter="__"
    )
