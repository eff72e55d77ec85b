#!/usr/bin/env python3
"""
Run the Sale Options Engine web server locally.
"""

import logging

import uvicorn

from utils.config import Config


def main():
    """Start the web server."""
    config = Config.load()

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"Starting Sale Options Engine on http://{config.host}:{config.port}")
    print("Press Ctrl+C to stop")

    uvicorn.run(
        "web.app:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )


if __name__ == "__main__":
    main()
