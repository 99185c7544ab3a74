"""Command-line entry point.

Usage:
    amplitude-mcp-server --api-key YOUR_AMPLITUDE_API_KEY [--debug]

The API key can also come from the ``AMPLITUDE_API_KEY`` environment
variable; flags take precedence over the environment.
"""

import argparse
import asyncio
import signal
import sys
from typing import Any, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from amplitude_mcp import __version__
from amplitude_mcp.core.config import Settings
from amplitude_mcp.core.container import create_container
from amplitude_mcp.core.exceptions import ConfigurationError
from amplitude_mcp.core.logging import LoggerConfigurator, logger
from amplitude_mcp.server import create_server, run_stdio


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="amplitude-mcp-server",
        description="MCP server for Amplitude analytics",
    )
    parser.add_argument("--api-key", dest="api_key", help="Your Amplitude API key")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug mode for verbose logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(args: argparse.Namespace, **settings_kwargs: Any) -> Settings:
    """Build settings from the environment, overridden by CLI flags.

    Raises:
        ConfigurationError: If the API key is missing or a value is invalid.
    """
    overrides: dict[str, Any] = {}
    if args.api_key is not None:
        overrides["AMPLITUDE_API_KEY"] = args.api_key
    if args.debug is not None:
        overrides["DEBUG"] = args.debug

    try:
        return Settings(**settings_kwargs, **overrides)
    except PydanticValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigurationError(
            f"Invalid configuration ({fields}). Pass --api-key or set AMPLITUDE_API_KEY."
        ) from e


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
    except ConfigurationError as e:
        print(f"amplitude-mcp-server: {e.message}", file=sys.stderr)
        return 1

    LoggerConfigurator.setup(debug=settings.DEBUG)

    try:
        container = create_container(settings)
        server = create_server(container)
    except Exception as e:
        logger.exception(f"Fatal error starting server: {e}")
        return 1

    _install_signal_handlers()
    logger.debug("Starting MCP server...")
    try:
        asyncio.run(run_stdio(server))
    except KeyboardInterrupt:
        logger.debug("Received interrupt, shutting down...")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1
    return 0


def _install_signal_handlers() -> None:
    def _terminate(signum: int, _frame: Any) -> None:
        logger.debug(f"Received {signal.Signals(signum).name}, shutting down...")
        sys.exit(0)

    signal.signal(signal.SIGTERM, _terminate)


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
