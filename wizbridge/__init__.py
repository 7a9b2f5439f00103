"""Bridge that toggles a WiZ bulb over UDP from a single HTTP endpoint."""

from wizbridge.config import BridgeConfig, ConfigError
from wizbridge.network import (
    BulbAddress,
    BulbError,
    BulbNetworkError,
    BulbParseError,
    BulbProtocolError,
    BulbSchemaError,
    BulbTimeoutError,
    toggle_bulb,
)
from wizbridge.server import create_app

__all__ = [
    "BridgeConfig",
    "ConfigError",
    "BulbAddress",
    "BulbError",
    "BulbNetworkError",
    "BulbParseError",
    "BulbProtocolError",
    "BulbSchemaError",
    "BulbTimeoutError",
    "toggle_bulb",
    "create_app",
]
