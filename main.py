"""
Railway entrypoint for the Sale Options Engine.

This is the ONLY Uvicorn entrypoint used in production.
Binds to 0.0.0.0:$PORT as required by Railway.
"""

import logging
import os

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    port = int(os.getenv("PORT", "8000"))
    print(f"Starting Sale Options Engine on port {port}")

    # Import app here to ensure clean module loading
    from web.app import app

    uvicorn.run(app, host="0.0.0.0", port=port)
