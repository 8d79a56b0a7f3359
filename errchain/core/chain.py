from collections.abc import Mapping
from typing import Optional

from .stack import StackTrace, capture


class ChainError(Exception):
    """
    Base of the four chain variants. A node owns at most one cause and is
    read-only once built.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self._message = message
        self._cause = cause
        # lets a raised chain print as a chained traceback
        self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def stack(self) -> Optional[StackTrace]:
        return None

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r})"


class Root(ChainError):
    def __init__(self, message: str, stack: StackTrace):
        super().__init__(message)
        self._stack = stack

    @property
    def stack(self) -> StackTrace:
        return self._stack


class StackWrap(ChainError):
    """
    Adds a stack snapshot to an existing error without changing its text.
    """

    def __init__(self, cause: BaseException, stack: StackTrace):
        super().__init__(message_of(cause), cause)
        self._stack = stack

    @property
    def stack(self) -> StackTrace:
        return self._stack


class MessageWrap(ChainError):
    def __init__(self, cause: BaseException, message: str):
        super().__init__(message, cause)


class CodeWrap(ChainError):
    def __init__(self, code: int, message: str, stack: StackTrace, cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self._code = code
        self._stack = stack

    @property
    def code(self) -> int:
        return self._code

    @property
    def stack(self) -> StackTrace:
        return self._stack

    def __repr__(self) -> str:
        return f"CodeWrap({self._code}, {self._message!r})"


def message_of(err: BaseException) -> str:
    if isinstance(err, ChainError):
        return err.message
    return str(err)


def _sprintf(format: str, args: tuple) -> str:
    if not args:
        return format
    # same convention as logging: a lone mapping feeds %(name)s placeholders
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return format % args[0]
    return format % args


def new(message: str) -> Root:
    return Root(message, capture(1))


def errorf(format: str, *args) -> Root:
    return Root(_sprintf(format, args), capture(1))


def with_stack(err: Optional[BaseException]) -> Optional[ChainError]:
    """
    Annotate `err` with the caller's stack. Re-stacking a coded error keeps
    its code and message.
    """
    if err is None:
        return None
    if isinstance(err, CodeWrap):
        return CodeWrap(err.code, err.message, capture(1), cause=err)
    return StackWrap(err, capture(1))


def with_message(err: Optional[BaseException], message: str) -> Optional[MessageWrap]:
    if err is None:
        return None
    return MessageWrap(err, message)


def with_messagef(err: Optional[BaseException], format: str, *args) -> Optional[MessageWrap]:
    if err is None:
        return None
    return MessageWrap(err, _sprintf(format, args))


def with_code(code: int, format: str, *args) -> CodeWrap:
    return CodeWrap(code, _sprintf(format, args), capture(1))


def _wrap(err: BaseException, message: str, stack: StackTrace) -> ChainError:
    if isinstance(err, CodeWrap):
        return CodeWrap(err.code, message, stack, cause=err)
    return StackWrap(MessageWrap(err, message), stack)


def wrap(err: Optional[BaseException], message: str) -> Optional[ChainError]:
    """
    Add context to `err`. A coded error stays coded under its existing code;
    anything else becomes a message node wrapped in a stack node.
    """
    if err is None:
        return None
    return _wrap(err, message, capture(1))


def wrapf(err: Optional[BaseException], format: str, *args) -> Optional[ChainError]:
    if err is None:
        return None
    return _wrap(err, _sprintf(format, args), capture(1))


def wrap_c(err: Optional[BaseException], code: int, format: str, *args) -> Optional[CodeWrap]:
    """
    Wrap `err` under `code`, replacing whatever code it carried before.
    """
    if err is None:
        return None
    return CodeWrap(code, _sprintf(format, args), capture(1), cause=err)


def cause(err: Optional[BaseException]) -> Optional[BaseException]:
    """
    Return the innermost error of the chain. Errors that are not chain nodes
    end the walk.
    """
    while isinstance(err, ChainError) and err.cause is not None:
        err = err.cause
    return err
