"""Centralized exception hierarchy for the care recommendation engine.

All engine exceptions inherit from :class:`CareEngineError` so that callers
can catch a single base class when they need a broad safety net, yet still
match on specific subclasses where narrower handling is appropriate.

Unparsable advice text is *not* an error: the plan text parsers return
``None`` and every consumer falls back to the current value.

Hierarchy
---------
::

    CareEngineError (base)
    ├── ValidationError      (bad input from caller)
    ├── NotFoundError        (store has no such plant)
    ├── ConflictError        (apply session state does not allow the call)
    └── ConfigurationError   (missing / invalid config)
"""

from __future__ import annotations


class CareEngineError(Exception):
    """Base exception for all care engine errors.

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


class ValidationError(CareEngineError):
    """Caller supplied invalid or incomplete input."""


class NotFoundError(CareEngineError):
    """Requested plant does not exist in the store."""


class ConflictError(CareEngineError):
    """Operation conflicts with the current apply session state."""


class ConfigurationError(CareEngineError):
    """Missing or invalid engine configuration."""
