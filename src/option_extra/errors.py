"""Panic reporting for unwrap-style operations.

Closure failures are never caught here; this module only covers the panics the
library raises itself when an extraction hits the wrong variant.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import NoReturn, Self

from pydantic import BaseModel

from .config import get_settings

logger = logging.getLogger("option_extra.errors")

_NO_VALUE = object()


class ErrorCode(StrEnum):
    """Codes identifying which extraction panicked."""
    UNWRAP = "UNWRAP"
    UNWRAP_ERR = "UNWRAP_ERR"
    EXPECT = "EXPECT"
    EXPECT_ERR = "EXPECT_ERR"
    UNWRAP_NOTHING = "UNWRAP_NOTHING"
    EXPECT_NOTHING = "EXPECT_NOTHING"


def _clip_repr(value: object, limit: int) -> str:
    text = repr(value)
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..." if limit > 3 else text[:limit]


class PanicInfo(BaseModel):
    """Structured description of a panic raised by an extraction."""

    model_config = {"frozen": True}

    operation: str
    message: str
    code: ErrorCode
    value: str | None = None

    @classmethod
    def create(cls, operation: str, message: str, code: ErrorCode, value: object = _NO_VALUE) -> Self:
        """Build from the offending value, honouring the value reporting settings."""
        settings = get_settings()
        shown = None
        if value is not _NO_VALUE and settings.include_values_in_errors:
            shown = _clip_repr(value, settings.repr_max_length)
        return cls(operation=operation, message=message, code=code, value=shown)

    def render(self) -> str:
        return self.message if self.value is None else f"{self.message}: {self.value}"

    __str__ = render


class UnwrapError(RuntimeError):
    """Raised when a value is extracted from the wrong variant."""

    __slots__ = ("info",)

    def __init__(self, info: PanicInfo) -> None:
        self.info = info
        super().__init__(info.render())

    @property
    def code(self) -> ErrorCode:
        return self.info.code


def panic(operation: str, message: str, code: ErrorCode, value: object = _NO_VALUE) -> NoReturn:
    """Log and raise an UnwrapError for ``operation``."""
    info = PanicInfo.create(operation, message, code, value)
    logger.debug("panic in %s [%s]: %s", operation, code, info.render())
    raise UnwrapError(info)
