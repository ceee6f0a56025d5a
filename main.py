"""
Alpha Hunter - Server Entry Point
=================================
Starts the FastAPI app under uvicorn.

Usage:
    python main.py                          # serve on 0.0.0.0:8000
    python main.py --port 9000 --reload     # dev mode on another port
    python main.py --log-level debug        # show per-stage pipeline logs
    python main.py --log-file logs/api.log  # also log to a file

Interactive docs are served at /docs (Swagger) and /redoc.
"""

import argparse
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from alpha_hunter import __version__
from alpha_hunter.logging_config import configure_logging, get_logger

logger = get_logger("alpha_hunter.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the Alpha Hunter API")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="uvicorn worker processes, ignored with --reload (default: 1)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "info"),
        help="debug, info, warning or error (default: $LOG_LEVEL or info)",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Mirror logs to this file")
    return parser


def main():
    args = build_parser().parse_args()
    configure_logging(level=args.log_level, log_file=args.log_file)

    verification = "enabled" if os.getenv("OPENROUTER_API_KEY") else "disabled (no API key)"
    logger.info("Alpha Hunter %s listening on http://%s:%d", __version__, args.host, args.port)
    logger.info("Docs at http://localhost:%d/docs, verification %s", args.port, verification)

    uvicorn.run(
        "alpha_hunter.api.endpoints:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=1 if args.reload else args.workers,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
