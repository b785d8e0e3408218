"""Fail codes: the contract every error catalog entry satisfies.

A catalog is a closed set of named ``(code, description)`` pairs for one
domain. Declare it as a ``FailCodeEnum`` subclass and decorate it with
``enum.unique`` so a duplicated code fails at import time:

    @unique
    class UserFailCode(FailCodeEnum):
        USER_NOT_FOUND = (1001, "User not found: %s")
        ACCOUNT_LOCKED = (1005, "Account is locked, please contact administrator")

Descriptions are ``%``-style templates with positional placeholders only.
Codes need to be unique within a catalog; nothing checks across catalogs.
"""

from __future__ import annotations

from enum import IntEnum, unique
from typing import Protocol, Self, runtime_checkable

__all__ = [
    "FailCode",
    "FailCodeEnum",
    "SystemFailCode",
    "SUCCESS_CODE",
    "SYSTEM_EXCEPTION",
    "SYSTEM_EXCEPTION_CODE",
    "SYSTEM_EXCEPTION_MSG",
    "OBJECT_NOT_FOUND",
    "OBJECT_NOT_FOUND_CODE",
    "OBJECT_NOT_FOUND_MSG",
]

# The only code that means success. Envelopes derive is_success from it.
SUCCESS_CODE = 0


@runtime_checkable
class FailCode(Protocol):
    """Anything exposing an integer code and a description template."""

    @property
    def value(self) -> int: ...

    @property
    def description(self) -> str: ...


class FailCodeEnum(IntEnum):
    """Base class for error catalogs.

    Members are declared as ``NAME = (code, description)``. The member's
    integer value is the code, so members compare equal to plain ints.
    """

    _description: str

    def __new__(cls, code: int, description: str) -> Self:
        member = int.__new__(cls, code)
        member._value_ = code
        member._description = description
        return member

    @property
    def description(self) -> str:
        """The message template for this entry."""
        return self._description

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self.name}: {self._value_}, {self._description!r}>"


@unique
class SystemFailCode(FailCodeEnum):
    """Codes reserved by the library itself."""

    OBJECT_NOT_FOUND = (404, "Object Not Found")
    SYSTEM_EXCEPTION = (500, "System Exception")


SYSTEM_EXCEPTION = SystemFailCode.SYSTEM_EXCEPTION
SYSTEM_EXCEPTION_CODE = int(SYSTEM_EXCEPTION)
SYSTEM_EXCEPTION_MSG = SYSTEM_EXCEPTION.description

OBJECT_NOT_FOUND = SystemFailCode.OBJECT_NOT_FOUND
OBJECT_NOT_FOUND_CODE = int(OBJECT_NOT_FOUND)
OBJECT_NOT_FOUND_MSG = OBJECT_NOT_FOUND.description
