"""Core types: fail codes, envelopes, coded errors and the Result type."""

from .codes import (
    OBJECT_NOT_FOUND,
    SUCCESS_CODE,
    SYSTEM_EXCEPTION,
    FailCode,
    FailCodeEnum,
    SystemFailCode,
)
from .envelope import Envelope, EnvelopeParseError, Failure, parse_envelope
from .exceptions import CodedError
from .result import Err, Ok, Result, is_err, is_ok
from .templates import TemplateFormatError, format_template

__all__ = [
    # codes
    "FailCode",
    "FailCodeEnum",
    "SystemFailCode",
    "SUCCESS_CODE",
    "SYSTEM_EXCEPTION",
    "OBJECT_NOT_FOUND",
    # envelope
    "Envelope",
    "EnvelopeParseError",
    "Failure",
    "parse_envelope",
    # exceptions
    "CodedError",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # templates
    "TemplateFormatError",
    "format_template",
]
