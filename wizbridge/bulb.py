import argparse
import json
import logging
import os
import socket
import threading
from typing import Any, Optional

from wizbridge.network import WIZ_PORT, RECV_BUFFER, BulbAddress

logger = logging.getLogger(__name__)


class SmartBulb:
    """In-memory WiZ bulb: answers getPilot, applies setState."""

    def __init__(self, is_on: bool = False, mac: str = "a8bb50000000"):
        self.is_on = is_on
        self.mac = mac
        self.dimming = 100

    def status(self) -> dict[str, Any]:
        return {
            "mac": self.mac,
            "rssi": -55,
            "state": self.is_on,
            "sceneId": 0,
            "temp": 2700,
            "dimming": self.dimming,
        }

    def handle(self, message: Any) -> Optional[bytes]:
        if not isinstance(message, dict):
            return None
        method = message.get("method")

        if method == "getPilot":
            reply = {"method": "getPilot", "env": "pro", "result": self.status()}
        elif method == "setState":
            params = message.get("params") or {}
            state = params.get("state")
            if not isinstance(state, bool):
                reply = {"method": "setState", "env": "pro",
                         "error": {"code": -32602, "message": "Invalid params"}}
            else:
                self.is_on = state
                reply = {"method": "setState", "env": "pro", "result": {"success": True}}
        else:
            reply = {"method": method, "env": "pro",
                     "error": {"code": -32601, "message": "Method not found"}}

        return json.dumps(reply, separators=(",", ":")).encode("utf-8")


class BulbSimulator:
    """UDP listener thread that plays the part of a bulb.

    Every datagram is recorded in ``received`` (decoded JSON, or raw bytes if
    it does not parse). ``reply`` forces a canned answer to every datagram and
    ``silent`` suppresses answers altogether.
    """

    def __init__(self, bulb: Optional[SmartBulb] = None, host: str = "127.0.0.1", port: int = 0,
                 reply: Optional[bytes] = None, silent: bool = False):
        self.bulb = bulb or SmartBulb()
        self.reply = reply
        self.silent = silent
        self.received: list[Any] = []
        self._cond = threading.Condition()
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._sock.bind((host, port))
        self._sock.settimeout(0.1)
        self._running = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def address(self) -> BulbAddress:
        host, port = self._sock.getsockname()
        return BulbAddress(host, port)

    def start(self) -> "BulbSimulator":
        self._running.set()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()
        return self

    def stop(self) -> None:
        self._running.clear()
        if self._thread is not None:
            self._thread.join(timeout=2)
        self._sock.close()

    def __enter__(self) -> "BulbSimulator":
        return self.start()

    def __exit__(self, *exc) -> None:
        self.stop()

    def wait_for(self, count: int, timeout: float = 2.0) -> bool:
        with self._cond:
            return self._cond.wait_for(lambda: len(self.received) >= count, timeout=timeout)

    def _serve(self) -> None:
        while self._running.is_set():
            try:
                data, addr = self._sock.recvfrom(RECV_BUFFER)
            except socket.timeout:
                continue
            except OSError:
                break

            try:
                message = json.loads(data.decode("utf-8"))
            except (UnicodeDecodeError, ValueError):
                message = data
            logger.info("[BULB] Received from %s: %s", addr, message)

            if self.reply is not None:
                answer = self.reply
            else:
                answer = self.bulb.handle(message)

            # record before answering so a waiting client never races the log
            with self._cond:
                self.received.append(message)
                self._cond.notify_all()

            if answer is not None and not self.silent:
                self._sock.sendto(answer, addr)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Simulated WiZ bulb speaking JSON over UDP.")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=WIZ_PORT, help=f"UDP port (default: {WIZ_PORT})")
    parser.add_argument("--on", action="store_true", help="Start with the bulb switched on")
    args = parser.parse_args()

    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"), format="%(asctime)s - %(message)s")

    sim = BulbSimulator(SmartBulb(is_on=args.on), host=args.host, port=args.port)
    logger.info("[BULB] Waiting for commands on %s", sim.address)
    try:
        with sim:
            threading.Event().wait()
    except KeyboardInterrupt:
        logger.info("[BULB] Stopped")
