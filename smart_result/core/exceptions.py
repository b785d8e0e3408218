"""Exception carrying a fail code, for domain logic that prefers raising."""

from __future__ import annotations

from .codes import FailCode
from .templates import render_template

__all__ = ["CodedError"]


class CodedError(Exception):
    """An exception with the same ``(code, description)`` pair as a catalog entry.

    Raise it from domain code and let the boundary turn it into an envelope
    with ``wrap_coded_error``. Chaining works as usual
    (``raise CodedError(...) from exc``); the cause stays on the exception
    and never reaches the envelope.

    Attributes:
        code: Failure code copied at construction.
        description: Message copied at construction.
    """

    def __init__(self, code: int, description: str | None) -> None:
        super().__init__(description)
        self.code = code
        self.description = description

    @classmethod
    def from_fail_code(cls, fail_code: FailCode, *args: object) -> CodedError:
        """Build from a catalog entry, formatting its template with args.

        The entry's value and description are copied now; the exception does
        not keep a reference to the entry.

        Raises:
            TemplateFormatError: If args do not fit the template.
        """
        return cls(int(fail_code.value), render_template(fail_code.description, args))

    def __reduce__(self) -> tuple[type[CodedError], tuple[int, str | None]]:
        return (type(self), (self.code, self.description))

    def __str__(self) -> str:
        return self.description or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, description={self.description!r})"
