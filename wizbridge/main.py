import argparse
import logging
import os
import sys

from wizbridge.config import BridgeConfig, ConfigError
from wizbridge.server import create_app

logger = logging.getLogger("wizbridge")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="HTTP endpoint that toggles a WiZ bulb over UDP.")
    parser.add_argument("--bulb-ip", help="Bulb address (default: $WIZ_BULB_IP)")
    parser.add_argument("--bulb-port", type=int, help="Bulb UDP port (default: 38899)")
    parser.add_argument("--timeout", type=float, help="Seconds to wait for the bulb's reply (default: 3)")
    parser.add_argument("--host", help="HTTP listen interface (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, help="HTTP listen port (default: 42424)")
    parser.add_argument("--path", dest="path_suffix", help="Path suffix that triggers the toggle (default: /bulb)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        config = BridgeConfig.from_env(**vars(args))
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    app = create_app(config)
    logger.info("Listening on TCP port %s (bulb %s)", config.port, config.address)
    app.run(host=config.host, port=config.port, threaded=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
