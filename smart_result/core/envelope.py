"""The result envelope returned across API boundaries.

An envelope is the one shape every operation reports: a status code, a
message and an optional payload. ``code == 0`` is the only success signal;
there is no stored flag.

Serialized form (see ``Envelope.to_dict``):

    {"code": 0, "message": "", "data": {...}}
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .codes import SUCCESS_CODE
from .result import Err, Ok, Result
from .structured import as_str_dict

__all__ = [
    "Envelope",
    "EnvelopeParseError",
    "Failure",
    "parse_envelope",
]


@dataclass(frozen=True, slots=True)
class Failure:
    """The failure half of an envelope, detached from any payload."""

    code: int
    message: str | None


@dataclass(slots=True)
class Envelope[T]:
    """Uniform outcome container.

    Fields are plain mutable attributes and nothing is validated: a caller
    can set ``data`` on a failure or a message on a success. Builders in
    ``smart_result.builder`` produce the conventional combinations.

    Attributes:
        code: 0 on success, a catalog code otherwise.
        message: Empty string on success by convention.
        data: Payload; only meaningful on success.
    """

    code: int = SUCCESS_CODE
    message: str | None = None
    data: T | None = None

    @property
    def is_success(self) -> bool:
        return self.code == SUCCESS_CODE

    def clone(self) -> Envelope[T]:
        """Return a new envelope with the same fields.

        The payload is shared, not copied.
        """
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "data": self.data}

    def to_result(self) -> Result[T | None, Failure]:
        """View the envelope as Ok(data) or Err(Failure)."""
        if self.is_success:
            return Ok(self.data)
        return Err(Failure(code=self.code, message=self.message))


@dataclass(frozen=True, slots=True)
class EnvelopeParseError:
    """Error when a decoded object does not have the envelope shape."""

    message: str
    field: str | None = None


def parse_envelope(obj: object) -> Result[Envelope[object], EnvelopeParseError]:
    """Rebuild an envelope from its serialized (decoded JSON) form.

    Args:
        obj: Typically the output of ``json.loads``.

    Returns:
        Ok(Envelope) when ``code`` is an int and ``message`` is a string or
        null; Err(EnvelopeParseError) otherwise. A missing ``message`` or
        ``data`` key reads as null.
    """
    table = as_str_dict(obj)
    if table is None:
        return Err(EnvelopeParseError("Envelope must be an object"))

    if "code" not in table:
        return Err(EnvelopeParseError("Missing envelope code", field="code"))
    code = table["code"]
    if isinstance(code, bool) or not isinstance(code, int):
        return Err(EnvelopeParseError(f"Envelope code must be an integer, got {code!r}", field="code"))

    message = table.get("message")
    if message is not None and not isinstance(message, str):
        return Err(
            EnvelopeParseError(f"Envelope message must be a string or null, got {message!r}", field="message")
        )

    return Ok(Envelope(code=code, message=message, data=table.get("data")))
