#!/usr/bin/env python3
"""FastAPI server runner."""

import argparse

import structlog
import uvicorn

from lms_core.api.app import create_app
from lms_core.config import load_config
from lms_core.logging import configure_logging

logger = structlog.get_logger()


def main(argv: list[str] | None = None):
    """Run the FastAPI server."""
    parser = argparse.ArgumentParser(description="LMS profile API")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(config)

    logger.info("Starting FastAPI server", port=args.port, environment=config.environment)

    try:
        uvicorn.run(
            create_app(config),
            host=args.host,
            port=args.port,
            log_config=None  # Use our structlog setup
        )
    except Exception as e:
        logger.error("Failed to start server", error=str(e))
        raise


if __name__ == "__main__":
    main()
