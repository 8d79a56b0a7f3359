import linecache
import sys
from types import CodeType
from typing import Iterator, Tuple, Union

MAX_DEPTH = 32


class Frame:
    """
    Marker for a single call frame: the code object and the line that was
    executing when the stack was captured. Names and source text are only
    looked up when a formatter asks for them.
    """

    __slots__ = ("_code", "_lineno")

    def __init__(self, code: CodeType, lineno: int):
        self._code = code
        self._lineno = lineno

    @property
    def function(self) -> str:
        return self._code.co_name

    @property
    def filename(self) -> str:
        return self._code.co_filename

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def line(self) -> str:
        return linecache.getline(self.filename, self._lineno).strip()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return self._code is other._code and self._lineno == other._lineno

    def __hash__(self) -> int:
        return hash((id(self._code), self._lineno))

    def __repr__(self) -> str:
        return f"<Frame {self.function} at {self.filename}:{self._lineno}>"


class StackTrace:
    """
    Immutable snapshot of call frames, innermost first.
    """

    __slots__ = ("_frames",)

    def __init__(self, frames: Tuple[Frame, ...] = ()):
        self._frames = tuple(frames)

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return StackTrace(self._frames[index])
        return self._frames[index]

    def __bool__(self) -> bool:
        return bool(self._frames)

    def __repr__(self) -> str:
        return f"<StackTrace depth={len(self._frames)}>"


EMPTY_STACK = StackTrace()


def capture(skip: int = 0, depth: int = MAX_DEPTH) -> StackTrace:
    """
    Snapshot the call stack starting at the caller of `capture`, skipping
    `skip` further frames. Returns an empty trace when the interpreter
    cannot provide frames.
    """
    getframe = getattr(sys, "_getframe", None)
    if getframe is None or depth <= 0:
        return EMPTY_STACK

    try:
        frame = getframe(skip + 1)
    except ValueError:
        # skip reaches past the outermost frame
        return EMPTY_STACK

    frames = []
    while frame is not None and len(frames) < depth:
        frames.append(Frame(frame.f_code, frame.f_lineno))
        frame = frame.f_back
    # drop the reference so the frame chain is not kept alive
    del frame
    return StackTrace(tuple(frames))
