"""Configuration error raised when merged overrides fail validation."""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Merged configuration failed validation and cannot be built."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None,
                 profile: Optional[str] = None):
        super().__init__(message)
        self.errors = errors or []
        self.profile = profile
        self.recoverable = False

    def __str__(self) -> str:
        base = super().__str__()
        if not self.errors:
            return base
        details = "; ".join(f"{err.field}: {err.message} (got: {err.value})" for err in self.errors)
        return f"{base}: {details}"
