from .warning_utils import LoggedMessageError, warnings_as_exceptions

__all__ = [
    "LoggedMessageError",
    "warnings_as_exceptions",
]
