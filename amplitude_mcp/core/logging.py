"""Logging setup.

All output goes to stderr: stdout carries the MCP protocol stream and must
never receive diagnostics.

Usage:
    from amplitude_mcp.core.logging import logger

    client_logger = logger.with_prefix("AmplitudeClient: ").with_context(component="ingestion")
    client_logger.debug("Sending request")
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

LOGGER_NAME = "amplitude_mcp"
LOG_FORMAT = "[%(asctime)s] [%(name)s] %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter carrying a message prefix and context dimensions.

    Dimensions are appended to every message as ``key=value`` pairs and are
    also attached to the record under ``extra`` so structured handlers can
    pick them up.
    """

    def __init__(
        self,
        logger: logging.Logger,
        prefix: str = "",
        dimensions: Optional[dict[str, Any]] = None,
    ) -> None:
        """Wrap ``logger`` with an optional prefix and dimensions."""
        self.prefix = prefix
        self.dimensions: dict[str, Any] = dict(dimensions or {})
        super().__init__(logger, {"dimensions": self.dimensions})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        """Apply the prefix and dimensions to a log call."""
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("dimensions", self.dimensions)
        kwargs["extra"] = extra

        text = f"{self.prefix}{msg}"
        if self.dimensions:
            rendered = " ".join(f"{key}={value}" for key, value in self.dimensions.items())
            text = f"{text} [{rendered}]"
        return text, kwargs

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a copy of this logger with ``prefix`` prepended to messages."""
        return ContextualLogger(self.logger, prefix=prefix, dimensions=self.dimensions)

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a copy of this logger with extra context dimensions."""
        return ContextualLogger(
            self.logger,
            prefix=self.prefix,
            dimensions={**self.dimensions, **dimensions},
        )


class LoggerConfigurator:
    """Builds and configures loggers for the process."""

    @staticmethod
    def configure_logger(
        name: str,
        dimensions: Optional[dict[str, Any]] = None,
    ) -> ContextualLogger:
        """Get a contextual logger for ``name`` with the given dimensions."""
        return ContextualLogger(logging.getLogger(name), dimensions=dimensions)

    @staticmethod
    def setup(debug: bool = False, stream: Any = None) -> None:
        """Attach the stderr handler to the package logger.

        With ``debug`` every request, response and error is logged. Otherwise
        only warnings and above are written. Calling this twice replaces the
        previous handler instead of stacking a second one.
        """
        root = logging.getLogger(LOGGER_NAME)
        for handler in list(root.handlers):
            if getattr(handler, "_amplitude_mcp", False):
                root.removeHandler(handler)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._amplitude_mcp = True  # type: ignore[attr-defined]

        root.addHandler(handler)
        root.setLevel(logging.DEBUG if debug else logging.WARNING)
        root.propagate = False


logger = LoggerConfigurator.configure_logger(LOGGER_NAME)
