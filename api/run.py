import os
import signal

import uvicorn

from api.config.logging_setup import setup_logging
from api.config.settings import get_settings

setup_logging()


def setup_signal_handlers():
    """Install handlers for a prompt shutdown."""
    def signal_handler(signum, frame):
        print(f"\n🛑 Received signal {signum}. Stopping server...")
        os._exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)


def main():
    """Start the API server locally."""
    settings = get_settings()
    host = settings.metaverse_host
    port = settings.metaverse_port

    print(f"Starting API at http://{host}:{port}")
    print("Press CTRL+C to quit.")

    setup_signal_handlers()

    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=True,
        reload_dirs=["api/"],
        reload_includes=["*.py"],
        log_config=None  # logging is already configured
    )


if __name__ == "__main__":
    main()
