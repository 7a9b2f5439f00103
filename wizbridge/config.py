import math
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from wizbridge.network import DEFAULT_TIMEOUT, WIZ_PORT, BulbAddress

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 42424
DEFAULT_PATH_SUFFIX = "/bulb"


class ConfigError(Exception):
    """Raised when the bridge cannot be configured from env/CLI."""


@dataclass(frozen=True)
class BridgeConfig:
    address: BulbAddress
    timeout: float = DEFAULT_TIMEOUT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    path_suffix: str = DEFAULT_PATH_SUFFIX

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "BridgeConfig":
        """Build the config from environment variables.

        Keyword overrides (bulb_ip, bulb_port, timeout, host, port, path_suffix)
        win over the environment when they are not None.
        """
        env = os.environ if environ is None else environ

        def pick(key: str, var: str, default: Any = None) -> Any:
            value = overrides.get(key)
            if value is not None:
                return value
            return env.get(var) or default

        bulb_ip = pick("bulb_ip", "WIZ_BULB_IP")
        if not bulb_ip or not str(bulb_ip).strip():
            raise ConfigError("WIZ_BULB_IP is not set")

        bulb_port = _to_port(pick("bulb_port", "WIZ_BULB_PORT", WIZ_PORT), "WIZ_BULB_PORT")
        port = _to_port(pick("port", "PORT", DEFAULT_PORT), "PORT")

        try:
            timeout = float(pick("timeout", "BULB_TIMEOUT", DEFAULT_TIMEOUT))
        except (TypeError, ValueError):
            raise ConfigError("BULB_TIMEOUT must be a number of seconds") from None
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError("BULB_TIMEOUT must be a finite number greater than 0")

        path_suffix = pick("path_suffix", "BULB_PATH", DEFAULT_PATH_SUFFIX)
        if not path_suffix.startswith("/"):
            path_suffix = "/" + path_suffix

        return cls(
            address=BulbAddress(str(bulb_ip).strip(), bulb_port),
            timeout=timeout,
            host=pick("host", "HOST", DEFAULT_HOST),
            port=port,
            path_suffix=path_suffix,
        )


def _to_port(value: Any, name: str) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer") from None
    if not (1 <= port <= 65535):
        raise ConfigError(f"{name} must be between 1 and 65535")
    return port
