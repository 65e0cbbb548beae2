"""Run the videohub server.

Usage:
    python -m videohub [--host HOST] [--port PORT] [--seed-sample]

Defaults come from VIDEOHUB_* environment variables or .env (see config.py).
"""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from videohub.api.app import create_app
from videohub.config import Settings

logger = logging.getLogger("videohub")


def main(argv: list[str] | None = None) -> int:
    settings = Settings()

    parser = argparse.ArgumentParser(prog="videohub", description="In-memory video catalogue API")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    parser.add_argument("--seed-sample", action="store_true", help="Insert the sample video at startup")
    args = parser.parse_args(argv)

    settings = settings.model_copy(
        update={
            "host": args.host,
            "port": args.port,
            "seed_sample": settings.seed_sample or args.seed_sample,
        }
    )

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings=settings)
    logger.info(f"videohub listening on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
    return 0


if __name__ == "__main__":
    sys.exit(main())
