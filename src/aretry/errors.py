"""aretry error hierarchy.

Hierarchy::

    AretryError
    ├── RetryStateError
    └── ConfigError
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError

None of these ever wrap an operation failure: the engine surfaces the
operation's own exception (or ``Err``) unchanged. These only signal misuse of
the library itself.
"""

from __future__ import annotations

import json
from typing import Any


class AretryError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
    """

    default_code: str = "aretry_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        return {"code": self.code, "message": self.message, "detail": self.detail}


class RetryStateError(AretryError):
    """A retry engine was driven twice, or reconfigured after use."""

    default_code = "retry_state_error"


class ConfigError(AretryError):
    """Raised when configuration is invalid or loading failed."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "AretryError",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RetryStateError",
]
