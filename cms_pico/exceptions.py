"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
specialized subclasses raised by the themes service, the website guard and
the storage layer. Every subclass carries a stable machine-readable code so
callers (controllers, the CLI, tests) can tell failures apart without
parsing the translated message.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'MIN_LENGTH'``).
    message : str
        Human-readable, already translated message.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.
    transient : bool, optional
        Whether the error is temporary and may be retried.

    Attributes
    ----------
    code : str
        Stable machine-readable error code.
    message : str
        Human-readable message.
    context : dict
        Structured, non-sensitive context for logging.
    transient : bool
        True if the error is transient.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'})
    >>> e.code
    'CODE'
    >>> str(e)
    'CODE: message'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class ConfigurationError(AppError):
    """Raised for invalid or missing configuration."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "CONFIGURATION_ERROR", message, context=context, transient=False
        )


class ThemeNotFoundError(AppError):
    """Raised when a theme name is neither built-in nor registered."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("THEME_NOT_FOUND", message, context=context)


class WebsiteValidationError(AppError):
    """Base class for the checks run before a website is persisted."""


class MinLengthError(WebsiteValidationError):
    """Raised when the site slug or the website name is too short."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("MIN_LENGTH", message, context=context)


class InvalidCharsError(WebsiteValidationError):
    """Raised when the site slug contains characters outside ``[A-Za-z0-9_-]``."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("INVALID_CHARS", message, context=context)


class InvalidPathError(WebsiteValidationError):
    """Raised for ``.``/``..`` path segments or paths outside the website root."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("INVALID_PATH", message, context=context)


class ContentNotLocalError(AppError):
    """Raised when a content directory points outside the owner's storage."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("CONTENT_NOT_LOCAL", message, context=context)


class NotOwnerError(AppError):
    """Raised when an account tries to manage a website it does not own."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("NOT_OWNER", message, context=context)


class PageNotFoundError(AppError):
    """Raised when the requested page has no entry in the owner's storage."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("PAGE_NOT_FOUND", message, context=context)


class AccessDeniedError(AppError):
    """Raised when a viewer requests a private page without read access."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("ACCESS_DENIED", message, context=context)


class NodeNotFoundError(AppError):
    """Raised by storage backends when a path, folder or id has no entry."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("NODE_NOT_FOUND", message, context=context)
