"""Process exit codes for the ``smart-result`` command.

These are shell exit statuses, unrelated to envelope codes. Values are
stable so scripts can branch on them.
"""

from enum import IntEnum

__all__ = ["ExitCode"]


class ExitCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: User error (bad catalog reference, import failure)
    - 2: Config error (unreadable or malformed config file)
    - 3: Check failed (catalog audit reported errors)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    CHECK_FAILED = 3

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ExitCode.OK
