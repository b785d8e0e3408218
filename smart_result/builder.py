"""Envelope builders: the only way outcomes should become envelopes.

Each function turns one kind of outcome into an ``Envelope``:

- ``wrap_success(data)``: a value
- ``wrap_failure(code, message)``: a raw code/message pair
- ``wrap_failure(fail_code, *args)``: a catalog entry, template filled with args
- ``wrap_coded_error(error)``: a raised ``CodedError``
- ``wrap_exception(exc)``: anything else, reported as the generic 500

``call_with_envelope`` and ``envelope_boundary`` run a callable and pick the
right builder for whatever it returned or raised.

All builders are pure except ``wrap_exception``, which writes the exception
to a diagnostic sink before discarding it.
"""

from __future__ import annotations

import contextlib
import functools
from collections.abc import Callable, Mapping
from typing import Any, overload

from smart_result.core.codes import SUCCESS_CODE, SYSTEM_EXCEPTION, FailCode
from smart_result.core.envelope import Envelope
from smart_result.core.exceptions import CodedError
from smart_result.core.result import Result
from smart_result.core.templates import TemplateFormatError, format_template, render_template
from smart_result.output.sink import DiagnosticSink, get_default_sink

__all__ = [
    "call_with_envelope",
    "envelope_boundary",
    "try_wrap_failure",
    "wrap_coded_error",
    "wrap_exception",
    "wrap_failure",
    "wrap_success",
]

_EXCEPTION_CONTEXT = "exception converted to system failure envelope:"


def wrap_success[T](data: T | None = None) -> Envelope[T]:
    """Wrap a payload as a success envelope (code 0, empty message)."""
    return Envelope(code=SUCCESS_CODE, message="", data=data)


@overload
def wrap_failure(code: FailCode, /, *args: object) -> Envelope[Any]: ...


@overload
def wrap_failure(code: int, message: str | None, /) -> Envelope[Any]: ...


def wrap_failure(code: int | FailCode, /, *args: object) -> Envelope[Any]:
    """Wrap a failure, from a catalog entry or a raw code/message pair.

    With a catalog entry, args fill the entry's template in order; with no
    args the template is used as-is. With a plain int, exactly one message
    argument is expected and is used verbatim.

    Passing code 0 yields an envelope whose ``is_success`` is True. This is
    not rejected.

    Raises:
        TemplateFormatError: If args do not fit the entry's template.
        TypeError: If a raw code is not followed by exactly one message.
    """
    if isinstance(code, FailCode):
        return Envelope(code=int(code.value), message=render_template(code.description, args))

    if len(args) != 1:
        raise TypeError(f"wrap_failure(code, message) takes exactly one message, got {len(args)}")
    message = args[0]
    if message is not None and not isinstance(message, str):
        raise TypeError(f"message must be a string or None, got {type(message).__name__}")
    return Envelope(code=code, message=message)


def try_wrap_failure(fail_code: FailCode, /, *args: object) -> Result[Envelope[Any], TemplateFormatError]:
    """Like ``wrap_failure(fail_code, *args)`` but return a template mismatch as Err."""
    code = int(fail_code.value)
    return format_template(fail_code.description, args).map(
        lambda message: Envelope(code=code, message=message)
    )


def wrap_coded_error(error: CodedError) -> Envelope[Any]:
    """Copy a CodedError's code and description into a failure envelope.

    The error's cause, traceback and type are not carried over.
    """
    return Envelope(code=error.code, message=error.description)


def wrap_exception(exc: BaseException | None = None, *, sink: DiagnosticSink | None = None) -> Envelope[Any]:
    """Report an unexpected exception as the generic system failure.

    The envelope is always code 500 / "System Exception" whatever exc is.
    When exc is given it goes to sink (or the process default sink); the
    caller never sees its type or message. Without exc nothing is recorded.
    Errors raised by the sink itself are suppressed.
    """
    if exc is not None:
        target = sink if sink is not None else get_default_sink()
        # A failing sink never replaces the envelope.
        with contextlib.suppress(Exception):
            target.exception(_EXCEPTION_CONTEXT, exc)
    return Envelope(code=int(SYSTEM_EXCEPTION.value), message=SYSTEM_EXCEPTION.description)


def _run[R](
    fn: Callable[..., R],
    args: tuple[object, ...],
    kwargs: Mapping[str, object],
    sink: DiagnosticSink | None,
) -> Envelope[R]:
    try:
        value = fn(*args, **kwargs)
    except CodedError as e:
        return wrap_coded_error(e)
    except Exception as e:
        return wrap_exception(e, sink=sink)
    return wrap_success(value)


def call_with_envelope[R](
    fn: Callable[..., R],
    /,
    *args: object,
    sink: DiagnosticSink | None = None,
    **kwargs: object,
) -> Envelope[R]:
    """Call fn and normalize its outcome into an envelope.

    - return value -> ``wrap_success``
    - ``CodedError`` -> ``wrap_coded_error``
    - any other ``Exception`` -> ``wrap_exception`` (recorded to sink)

    ``BaseException`` subclasses such as ``KeyboardInterrupt`` propagate.
    The ``sink`` keyword is consumed here and not forwarded to fn.
    """
    return _run(fn, args, kwargs, sink)


def envelope_boundary[**P, R](
    *, sink: DiagnosticSink | None = None
) -> Callable[[Callable[P, R]], Callable[P, Envelope[R]]]:
    """Decorator form of ``call_with_envelope``.

    Usage:
        @envelope_boundary()
        def get_user(user_id: str) -> User:
            ...

        envelope = get_user("42")
    """

    def decorate(fn: Callable[P, R]) -> Callable[P, Envelope[R]]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Envelope[R]:
            return _run(fn, args, kwargs, sink)

        return wrapper

    return decorate
