"""Exception hierarchy shared by every layer."""

from __future__ import annotations


class ChessDssError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(ChessDssError):
    """An environment setting could not be parsed."""


class AnalysisError(ChessDssError):
    """The analysis service could not produce a result."""
