"""Uniform success/failure envelopes for service boundaries.

    from smart_result import wrap_failure, wrap_success

    envelope = wrap_success(user)
    envelope = wrap_failure(UserFailCode.USER_NOT_FOUND, user_id)
"""

from smart_result.builder import (
    call_with_envelope,
    envelope_boundary,
    try_wrap_failure,
    wrap_coded_error,
    wrap_exception,
    wrap_failure,
    wrap_success,
)
from smart_result.core.codes import (
    OBJECT_NOT_FOUND,
    SUCCESS_CODE,
    SYSTEM_EXCEPTION,
    FailCode,
    FailCodeEnum,
    SystemFailCode,
)
from smart_result.core.envelope import Envelope, Failure, parse_envelope
from smart_result.core.exceptions import CodedError
from smart_result.core.templates import TemplateFormatError

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # builders
    "call_with_envelope",
    "envelope_boundary",
    "try_wrap_failure",
    "wrap_coded_error",
    "wrap_exception",
    "wrap_failure",
    "wrap_success",
    # types
    "CodedError",
    "Envelope",
    "FailCode",
    "FailCodeEnum",
    "Failure",
    "SystemFailCode",
    "TemplateFormatError",
    "parse_envelope",
    # constants
    "OBJECT_NOT_FOUND",
    "SUCCESS_CODE",
    "SYSTEM_EXCEPTION",
]
