"""
is-railway exception hierarchy.

All library exceptions inherit from IsRailwayError, so consumers can catch
library-level errors while still distinguishing specific failure modes.
"""


class IsRailwayError(Exception):
    """Base exception class for all is-railway errors."""


class InvalidArgumentError(IsRailwayError, ValueError):
    """Raised when a required argument is missing or empty."""
