"""Process entry point: `sevalla-mcp` / `python -m sevalla_mcp`."""

import argparse
import asyncio
import sys

from pydantic import ValidationError

from sevalla_mcp import __version__
from sevalla_mcp.config import ConfigurationError, get_settings
from sevalla_mcp.observability.logging import get_logger, setup_logging
from sevalla_mcp.server import serve_stdio

ENVIRONMENT_HELP = "Environment variables: SEVALLA_API_KEY, SEVALLA_COMPANY_ID"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sevalla-mcp",
        description=f"sevalla-mcp v{__version__} - MCP server for Sevalla cloud hosting API",
        epilog=ENVIRONMENT_HELP,
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv: list[str] | None = None) -> int:
    build_parser().parse_args(argv)

    try:
        settings = get_settings()
        config = settings.client_config()
    except (ConfigurationError, ValidationError) as exc:
        print(exc, file=sys.stderr)
        return 1

    setup_logging(level=settings.log_level, format=settings.log_format)
    logger = get_logger(__name__)

    try:
        asyncio.run(serve_stdio(config))
    except KeyboardInterrupt:
        return 0
    except Exception:
        logger.exception("server_crashed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
