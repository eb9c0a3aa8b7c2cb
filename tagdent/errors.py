"""Domain exceptions for configuration diagnostics."""

from __future__ import annotations


class TagdentError(Exception):
    """Base class for errors raised by tagdent."""


class ConfigurationError(TagdentError, ValueError):
    """Raised when a dedent configuration value cannot be accepted."""

    def __init__(
        self,
        *,
        field: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a field-scoped configuration error."""

        super().__init__(detail)
        self.field = field
        self.detail = detail
        self.hint = hint
