import logging
import os
import socket

from rc_browser.logging_config import configure_logging
from rc_browser.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("rc_browser.app")

CONFIG_ROOT = os.getenv("RC_BROWSER_CONFIG_ROOT", "config")
DEFAULT_PORT = 8051

app = create_dash_app(CONFIG_ROOT)
server = app.server


def find_free_port(start_port: int, attempts: int = 100) -> int:
    """First port from start_port on that nothing listens on; start_port if none is free."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        logger.warning(
            "Preferred port is taken",
            extra={"preferred_port": preferred_port, "port": port},
        )

    logger.info(
        "Starting radiocarbon browser",
        extra={"config_root": CONFIG_ROOT, "port": port, "debug": debug},
    )
    app.run(host="0.0.0.0", port=port, debug=debug)
