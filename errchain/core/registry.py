import logging
import threading
from typing import Dict, List, Optional

from ..common.errors import ErrorKind, RegistrationError
from ..interfaces import ICoder
from .chain import CodeWrap

logger = logging.getLogger(__name__)

RESERVED_CODE = 0
UNKNOWN_CODE = 1
UNKNOWN_REFERENCE = "README.md#error-codes"


class DefaultCoder(ICoder):
    def __init__(self, code: int, http_status: int = 500, display_text: str = "", reference: str = ""):
        self._code = code
        self._http_status = http_status
        self._display_text = display_text
        self._reference = reference

    @property
    def code(self) -> int:
        return self._code

    @property
    def http_status(self) -> int:
        # 0 means "not set"
        if self._http_status == 0:
            return 500
        return self._http_status

    @property
    def display_text(self) -> str:
        return self._display_text

    @property
    def reference(self) -> str:
        return self._reference

    def __eq__(self, other) -> bool:
        if not isinstance(other, DefaultCoder):
            return NotImplemented
        return (self._code, self._http_status, self._display_text, self._reference) == (
            other._code,
            other._http_status,
            other._display_text,
            other._reference,
        )

    def __hash__(self) -> int:
        return hash((self._code, self._http_status, self._display_text, self._reference))

    def __repr__(self) -> str:
        return f"DefaultCoder(code={self._code}, http_status={self._http_status}, display_text={self._display_text!r})"


UNKNOWN_CODER = DefaultCoder(
    code=UNKNOWN_CODE,
    http_status=500,
    display_text="An internal server error occurred",
    reference=UNKNOWN_REFERENCE,
)


def _check_reserved(coder: ICoder) -> None:
    if coder.code == RESERVED_CODE:
        raise RegistrationError(
            f"code `{RESERVED_CODE}` is reserved by errchain as the unknown error code",
            ErrorKind.RESERVED_CODE,
        )


class Registry:
    """
    Maps integer codes to coders. Every lookup and every registration goes
    through one lock. A new registry already holds the unknown coder.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._codes: Dict[int, ICoder] = {UNKNOWN_CODER.code: UNKNOWN_CODER}

    def register(self, coder: ICoder) -> None:
        """
        Insert `coder`, replacing any coder already registered for its code.
        """
        _check_reserved(coder)
        with self._lock:
            previous = self._codes.get(coder.code)
            self._codes[coder.code] = coder
        if previous is not None:
            logger.debug("Code %d re-registered (%r -> %r)", coder.code, previous, coder)
        else:
            logger.debug("Registered code %d", coder.code)

    def must_register(self, coder: ICoder) -> None:
        """
        Insert `coder`, refusing to replace an existing registration.
        """
        _check_reserved(coder)
        with self._lock:
            if coder.code in self._codes:
                raise RegistrationError(f"code: {coder.code} already exist", ErrorKind.DUPLICATE_CODE)
            self._codes[coder.code] = coder
        logger.debug("Registered code %d", coder.code)

    def parse_code(self, err: Optional[BaseException]) -> Optional[ICoder]:
        """
        Resolve the code of the outermost node of `err`. Uncoded errors and
        unregistered codes resolve to the unknown coder; None stays None.
        """
        if err is None:
            return None
        if isinstance(err, CodeWrap):
            with self._lock:
                coder = self._codes.get(err.code)
            if coder is not None:
                return coder
        return UNKNOWN_CODER

    def get(self, code: int) -> Optional[ICoder]:
        with self._lock:
            return self._codes.get(code)

    def coders(self) -> List[ICoder]:
        with self._lock:
            snapshot = list(self._codes.values())
        return sorted(snapshot, key=lambda coder: coder.code)

    def __contains__(self, code: int) -> bool:
        with self._lock:
            return code in self._codes

    def __len__(self) -> int:
        with self._lock:
            return len(self._codes)


def is_code(err: Optional[BaseException], code: int) -> bool:
    if isinstance(err, CodeWrap):
        return err.code == code
    return False


_default_registry = Registry()


def default_registry() -> Registry:
    """Registry shared by the module-level helpers."""
    return _default_registry


def _resolve(registry: Optional[Registry]) -> Registry:
    return registry if registry is not None else _default_registry


def register(coder: ICoder, registry: Optional[Registry] = None) -> None:
    _resolve(registry).register(coder)


def must_register(coder: ICoder, registry: Optional[Registry] = None) -> None:
    _resolve(registry).must_register(coder)


def parse_code(err: Optional[BaseException], registry: Optional[Registry] = None) -> Optional[ICoder]:
    return _resolve(registry).parse_code(err)
