"""
Error chains with stack snapshots and registered error codes.
"""

from errchain.common.errors import ConfigError, ErrchainError, ErrorKind, RegistrationError
from errchain.core.chain import (
    ChainError,
    CodeWrap,
    MessageWrap,
    Root,
    StackWrap,
    cause,
    errorf,
    new,
    with_code,
    with_message,
    with_messagef,
    with_stack,
    wrap,
    wrap_c,
    wrapf,
)
from errchain.core.registry import (
    RESERVED_CODE,
    UNKNOWN_CODE,
    UNKNOWN_CODER,
    DefaultCoder,
    Registry,
    default_registry,
    is_code,
    must_register,
    parse_code,
    register,
)
from errchain.core.render import RenderMode, render
from errchain.core.stack import Frame, StackTrace, capture
from errchain.interfaces import ICoder
