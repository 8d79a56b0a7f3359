from enum import Enum
from typing import List, Optional

from .chain import ChainError, CodeWrap, MessageWrap, Root, StackWrap
from .stack import StackTrace


class RenderMode(Enum):
    SHORT = "short"
    FULL = "full"


def render_stack(stack: Optional[StackTrace], source_lines: bool = False) -> str:
    """
    Format frames innermost first, one traceback-style entry per frame.
    Names and source are resolved here, not at capture time.
    """
    if not stack:
        return ""
    parts: List[str] = []
    for frame in stack:
        parts.append(f'\n  File "{frame.filename}", line {frame.lineno}, in {frame.function}')
        if source_lines:
            line = frame.line
            if line:
                parts.append(f"\n    {line}")
    return "".join(parts)


def _render_full(err: BaseException, source_lines: bool) -> str:
    if isinstance(err, Root):
        return err.message + render_stack(err.stack, source_lines)
    if isinstance(err, CodeWrap):
        text = err.message + render_stack(err.stack, source_lines)
        if err.cause is not None:
            return _render_full(err.cause, source_lines) + "\n" + text
        return text
    if isinstance(err, StackWrap):
        return _render_full(err.cause, source_lines) + render_stack(err.stack, source_lines)
    if isinstance(err, MessageWrap):
        return _render_full(err.cause, source_lines) + "\n" + err.message
    if isinstance(err, ChainError):
        return err.message
    return str(err)


def render(err: Optional[BaseException], mode: RenderMode = RenderMode.SHORT, source_lines: bool = False) -> str:
    """
    SHORT yields the outermost message only. FULL walks the cause chain from
    the innermost error outwards and appends the stack of every node that
    captured one.
    """
    if err is None:
        return ""
    if mode is RenderMode.FULL:
        return _render_full(err, source_lines)
    return str(err)
