"""
Exception hierarchy for tunegraph.

The graph and trie structures never raise for unknown nodes; these errors
are raised by the catalog, the configuration loader and the services.
"""

from __future__ import annotations


class TuneGraphError(Exception):
    """Base exception for tunegraph errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class NotFoundError(TuneGraphError):
    """A song, user or artist is not present in the catalog."""


class ValidationError(TuneGraphError):
    """A request is structurally invalid (duplicate id, self-follow, ...)."""


class ConfigError(TuneGraphError):
    """Configuration or catalog file could not be parsed."""
