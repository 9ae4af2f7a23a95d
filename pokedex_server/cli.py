"""Command-line entrypoint for the Pokédex MCP server."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pokemon_tools.config import Settings, load_settings
from pokemon_tools.gateway import PokemonGateway
from pokemon_tools.pokemon_client import PokemonAPIClient
from pokedex_server.server import build_server

TRANSPORTS = ("stdio", "sse", "streamable-http")

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the stdio MCP stream."""
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def log_level(value: str) -> str:
    """argparse type for --log-level: a stdlib logging level name."""
    level = value.strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise argparse.ArgumentTypeError(f"unknown log level: {value}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokedex-mcp",
        description="Serve PokéAPI lookups as MCP tools.",
    )
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="stdio",
        help="MCP transport to serve on (default: stdio).",
    )
    parser.add_argument(
        "--log-level",
        type=log_level,
        default=None,
        help="Overrides POKEDEX_MCP_LOG_LEVEL (e.g. DEBUG, INFO).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings()
    if args.log_level:
        settings = Settings(**{**settings.model_dump(), "log_level": args.log_level})
    configure_logging(settings.log_level)

    with PokemonAPIClient(settings) as client:
        server = build_server(PokemonGateway(client))
        logger.info("Serving %s over %s (upstream %s)", server.name, args.transport, settings.base_url)
        server.run(transport=args.transport)
    return 0


if __name__ == "__main__":
    sys.exit(main())
