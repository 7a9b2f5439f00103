import json
import logging
import socket
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

WIZ_PORT = 38899
RECV_BUFFER = 2048
DEFAULT_TIMEOUT = 3.0


@dataclass(frozen=True)
class BulbAddress:
    host: str
    port: int = WIZ_PORT

    def as_tuple(self) -> tuple[str, int]:
        return (self.host, self.port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


#Errors

class BulbError(Exception):
    """Base class for anything that can go wrong talking to the bulb."""


class BulbNetworkError(BulbError):
    pass


class BulbTimeoutError(BulbNetworkError):
    pass


class BulbProtocolError(BulbError):
    pass


class BulbParseError(BulbProtocolError):
    pass


class BulbSchemaError(BulbProtocolError):
    pass


#Messages

def _encode(message: dict[str, Any]) -> bytes:
    return json.dumps(message, separators=(",", ":")).encode("utf-8")


def get_pilot_message() -> bytes:
    return _encode({"method": "getPilot"})


def set_state_message(state: bool) -> bytes:
    return _encode({"method": "setState", "params": {"state": bool(state)}})


def parse_state(payload: bytes) -> bool:
    """Extract result.state from a getPilot reply.

    Raises BulbParseError for bytes that are not UTF-8 JSON and
    BulbSchemaError when result.state is missing or not a boolean.
    """
    try:
        data = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise BulbParseError(f"Invalid reply from bulb: {e}") from e

    result = data.get("result") if isinstance(data, dict) else None
    state = result.get("state") if isinstance(result, dict) else None
    if not isinstance(state, bool):
        raise BulbSchemaError(f"Missing result.state in reply: {data!r}")
    return state


#Toggle

def toggle_bulb(address: BulbAddress, timeout: float = DEFAULT_TIMEOUT) -> bool:
    """Read the bulb's power state and send the inverse. Returns the new state.

    The setState datagram is fire-and-forget, the bulb's answer to it is never
    read. The socket lives only for this call.
    """
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as e:
        raise BulbNetworkError(f"Could not open UDP socket: {e}") from e

    with sock:
        try:
            sock.bind(("", 0))
            sock.settimeout(timeout)
            sock.sendto(get_pilot_message(), address.as_tuple())
            data, _ = sock.recvfrom(RECV_BUFFER)
        except socket.timeout as e:
            raise BulbTimeoutError(f"No reply from {address} within {timeout}s") from e
        except OSError as e:
            raise BulbNetworkError(f"getPilot to {address} failed: {e}") from e

        current_state = parse_state(data)
        new_state = not current_state
        logger.info("Current state: %s", current_state)
        logger.info("Setting to: %s", new_state)

        try:
            sock.sendto(set_state_message(new_state), address.as_tuple())
        except OSError as e:
            raise BulbNetworkError(f"setState to {address} failed: {e}") from e

    return new_state
