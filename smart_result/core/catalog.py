"""Catalog loading and auditing.

``audit_catalog`` looks for entries that will misbehave at runtime: a code
that reads as success, templates the builder cannot format positionally,
and collisions with the reserved codes.
"""

from __future__ import annotations

import importlib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, auto

from .codes import SUCCESS_CODE, FailCode, SystemFailCode
from .result import Err, Ok, Result
from .templates import scan_template

__all__ = [
    "CatalogEntry",
    "CatalogIssue",
    "CatalogLoadError",
    "CatalogReport",
    "IssueSeverity",
    "audit_catalog",
    "describe_catalog",
    "load_catalog",
]

_RESERVED = {int(member.value): member for member in SystemFailCode}


class IssueSeverity(Enum):
    WARNING = auto()
    ERROR = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class CatalogIssue:
    """A single audit finding.

    Attributes:
        name: Entry name (e.g. "USER_NOT_FOUND").
        severity: WARNING or ERROR.
        message: What is wrong.
    """

    name: str
    severity: IssueSeverity
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity == IssueSeverity.ERROR

    @classmethod
    def error(cls, name: str, message: str) -> CatalogIssue:
        return cls(name=name, severity=IssueSeverity.ERROR, message=message)

    @classmethod
    def warning(cls, name: str, message: str) -> CatalogIssue:
        return cls(name=name, severity=IssueSeverity.WARNING, message=message)


@dataclass(frozen=True, slots=True)
class CatalogReport:
    catalog: str
    entries: int
    issues: tuple[CatalogIssue, ...]

    def has_errors(self) -> bool:
        return any(issue.is_error for issue in self.issues)

    @property
    def errors(self) -> list[CatalogIssue]:
        return [i for i in self.issues if i.is_error]

    @property
    def warnings(self) -> list[CatalogIssue]:
        return [i for i in self.issues if not i.is_error]


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One row of ``describe_catalog``; placeholders is None for a broken template."""

    name: str
    code: int
    description: str
    placeholders: int | None


@dataclass(frozen=True, slots=True)
class CatalogLoadError:
    message: str
    ref: str


def _entry_name(entry: FailCode) -> str:
    name = getattr(entry, "name", None)
    return name if isinstance(name, str) else repr(entry)


def _catalog_name(catalog: Iterable[FailCode]) -> str:
    name = getattr(catalog, "__name__", None)
    return name if isinstance(name, str) else type(catalog).__name__


def audit_catalog(catalog: Iterable[FailCode], *, allow_reserved: bool = False) -> CatalogReport:
    """Check every entry of a catalog.

    Rules:
        - code 0 is an error (envelopes would report success);
        - a template that is not a valid ``%`` template is an error;
        - named placeholders are an error (substitution is positional);
        - reusing 404/500 is a warning unless allow_reserved is set.
          ``SystemFailCode`` itself is never flagged.
        - duplicate codes are an error (only reachable for catalogs that
          are not ``enum.unique``; enum aliases are not iterated, so those
          are caught through ``__members__``).
    """
    issues: list[CatalogIssue] = []
    entries = list(catalog)
    is_system = catalog is SystemFailCode

    for entry in entries:
        name = _entry_name(entry)
        code = int(entry.value)

        if code == SUCCESS_CODE:
            issues.append(CatalogIssue.error(name, "code 0 is the success code"))

        reserved = _RESERVED.get(code)
        if reserved is not None and not is_system and not allow_reserved:
            issues.append(CatalogIssue.warning(name, f"code {code} is reserved for {reserved.name}"))

        match scan_template(entry.description):
            case Err(reason):
                issues.append(CatalogIssue.error(name, f"template {entry.description!r}: {reason}"))
            case Ok(info) if info.named:
                keys = ", ".join(info.named)
                issues.append(CatalogIssue.error(name, f"named placeholders are not supported: {keys}"))
            case _:
                pass

    members = getattr(catalog, "__members__", None)
    if isinstance(members, Mapping):
        for alias, member in members.items():
            if alias != getattr(member, "name", alias):
                issues.append(CatalogIssue.error(alias, f"duplicate code {int(member.value)} (alias of {member.name})"))

    return CatalogReport(catalog=_catalog_name(catalog), entries=len(entries), issues=tuple(issues))


def describe_catalog(catalog: Iterable[FailCode]) -> list[CatalogEntry]:
    """List entries sorted by code."""
    rows: list[CatalogEntry] = []
    for entry in catalog:
        info = scan_template(entry.description)
        rows.append(
            CatalogEntry(
                name=_entry_name(entry),
                code=int(entry.value),
                description=entry.description,
                placeholders=info.value.positional if isinstance(info, Ok) else None,
            )
        )
    return sorted(rows, key=lambda row: row.code)


def load_catalog(ref: str) -> Result[type[Enum], CatalogLoadError]:
    """Import a catalog from a ``package.module:ClassName`` reference."""
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        return Err(CatalogLoadError("expected MODULE:ATTR", ref=ref))

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        return Err(CatalogLoadError(f"cannot import {module_name}: {e}", ref=ref))
    except (TypeError, ValueError) as e:
        # enum.unique rejects duplicate codes and FailCodeEnum rejects members
        # declared without a description, both at import time
        return Err(CatalogLoadError(f"{module_name} failed to load: {e}", ref=ref))

    obj: object = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            return Err(CatalogLoadError(f"{module_name} has no attribute {attr}", ref=ref))

    if not (isinstance(obj, type) and issubclass(obj, Enum)):
        return Err(CatalogLoadError(f"{attr} is not an enum", ref=ref))
    if not all(isinstance(member, FailCode) for member in obj):
        return Err(CatalogLoadError(f"{attr} members do not expose value and description", ref=ref))
    return Ok(obj)
