"""Centralized exception hierarchy for SmartHome.

All domain and service exceptions inherit from :class:`SmartHomeError` so that
callers can catch a single base class when they need a broad safety net, yet
still match on specific subclasses where narrower handling is appropriate.

Lookup failures inside the capability catalogues are *not* errors: they are
reported as ``None`` results, and duplicates as ``False``. Only broken
preconditions and unreadable configuration raise.

Hierarchy
---------
::

    SmartHomeError (base)
    ├── ValidationError          (bad input from caller)
    └── ConfigurationError       (missing / unreadable config)
"""

from __future__ import annotations


class SmartHomeError(Exception):
    """Base exception for all SmartHome errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


# ── Caller errors ────────────────────────────────────────────────────


class ValidationError(SmartHomeError):
    """Caller supplied invalid or incomplete input."""


# ── Environment errors ───────────────────────────────────────────────


class ConfigurationError(SmartHomeError):
    """Missing or unreadable catalogue configuration."""
