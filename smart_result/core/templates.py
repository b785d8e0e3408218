"""Positional message templates.

Catalog descriptions are ``%``-style templates (``"User not found: %s"``).
Arguments are substituted left to right; a count or type mismatch is a
``TemplateFormatError``, never a silently truncated message.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .result import Err, Ok, Result

__all__ = [
    "TemplateFormatError",
    "TemplateInfo",
    "format_template",
    "render_template",
    "scan_template",
]

_PLACEHOLDER = re.compile(
    r"%(?:\((?P<key>[^)]*)\))?"
    r"[#0\- +]*"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<precision>\*|\d+))?"
    r"[hlL]?"
    r"(?P<conv>[diouxXeEfFgGcrsa%])"
)


class TemplateFormatError(ValueError):
    """Arguments did not fit a description template."""

    def __init__(self, template: str, args: tuple[object, ...], reason: str) -> None:
        super().__init__(f"cannot format {template!r} with {len(args)} argument(s): {reason}")
        self.template = template
        self.args_given = args
        self.reason = reason

    def __reduce__(self) -> tuple[type[TemplateFormatError], tuple[str, tuple[object, ...], str]]:
        return (type(self), (self.template, self.args_given, self.reason))


@dataclass(frozen=True, slots=True)
class TemplateInfo:
    """What a template expects.

    Attributes:
        positional: Number of positional arguments consumed (``*`` widths count).
        named: Keys of ``%(name)s`` style placeholders, in order.
    """

    positional: int
    named: tuple[str, ...] = ()


def scan_template(template: str) -> Result[TemplateInfo, str]:
    """Count the placeholders in a template without formatting it.

    Returns Err with a reason when a ``%`` does not start a valid
    conversion (e.g. a trailing ``%`` or ``%q``).
    """
    positional = 0
    named: list[str] = []
    pos = 0
    while (pos := template.find("%", pos)) >= 0:
        m = _PLACEHOLDER.match(template, pos)
        if m is None:
            return Err(f"invalid placeholder at index {pos}")
        if m["conv"] != "%":
            if m["key"] is not None:
                named.append(m["key"])
            else:
                positional += 1
                positional += (m["width"] == "*") + (m["precision"] == "*")
        pos = m.end()
    return Ok(TemplateInfo(positional=positional, named=tuple(named)))


def format_template(template: str, args: Sequence[object]) -> Result[str, TemplateFormatError]:
    """Substitute args into template.

    With no args the template is returned untouched, even if it has
    placeholders or a literal ``%``.
    """
    if not args:
        return Ok(template)
    values = tuple(args)
    try:
        return Ok(template % values)
    except (TypeError, ValueError) as e:
        error = TemplateFormatError(template, values, str(e))
        error.__cause__ = e
        return Err(error)


def render_template(template: str, args: Sequence[object]) -> str:
    """Like format_template, but raise TemplateFormatError on mismatch."""
    match format_template(template, args):
        case Ok(message):
            return message
        case Err(error):
            raise error
