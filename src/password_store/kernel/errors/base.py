"""Root of the password-store error hierarchy."""

from __future__ import annotations

from typing import Any

from password_store.kernel.security import mask


class BaseError(Exception):
    """Root of every error the password store raises.

    Errors end up in logs and API responses. ``detail`` is therefore masked
    on serialisation and a chained ``cause`` is reported by type only, since
    backend exceptions may quote the payload they rejected.

    Args:
        message: Human-readable description, never plaintext.
        code: Machine-readable slug, ``default_code`` when omitted.
        detail: Extra context for :meth:`to_dict`.
        cause: Backend exception behind this error; also set as ``__cause__``.
    """

    default_code: str = "password_store_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.message} [{self.code}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            payload["detail"] = mask(self.detail)
        if self.cause is not None:
            payload["cause"] = type(self.cause).__name__
        return payload


__all__ = ["BaseError"]
