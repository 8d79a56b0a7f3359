from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    RESERVED_CODE = "RESERVED_CODE"
    DUPLICATE_CODE = "DUPLICATE_CODE"
    INVALID_STATUS = "INVALID_STATUS"
    CONFIG = "CONFIG"
    UNKNOWN = "UNKNOWN"


class ErrchainError(Exception):
    """
    Fault raised by the library itself (misuse of the registry, broken
    configuration). Carries a classification so callers can decide whether
    to halt initialization.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.original_exception = original_exception

    def __str__(self) -> str:
        base = super().__str__()
        return f"[{self.kind.name}] {base}"


class RegistrationError(ErrchainError):
    """
    Programmer error detected while registering a coder: reserved code,
    duplicate code on strict insert, or an HTTP status outside the whitelist.
    """
    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message, kind)


class ConfigError(ErrchainError):
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message, ErrorKind.CONFIG, original_exception)
