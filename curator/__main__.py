"""
Entry point for the dashboard server.

Usage:
    python -m curator                  # Development (auto-reload)
    python -m curator --production     # Production mode
"""
from __future__ import annotations

import argparse
import os

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Capture Curator dashboard server")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", 8000)),
                        help="Port to listen on (default: 8000)")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    parser.add_argument("--production", action="store_true", help="Run without auto-reload")
    args = parser.parse_args()

    uvicorn.run(
        "curator.app:app",
        host=args.host,
        port=args.port,
        reload=not args.production,
    )


if __name__ == "__main__":
    main()
