import logging
from typing import Iterable, List

from ..common.errors import ErrorKind, RegistrationError
from .registry import DefaultCoder, Registry

logger = logging.getLogger(__name__)

ALLOWED_HTTP_STATUSES = (200, 400, 401, 403, 404, 500)


def register_code(
    registry: Registry,
    code: int,
    http_status: int,
    message: str,
    reference: str = "",
) -> DefaultCoder:
    """
    Strictly register a single catalog entry. Only the statuses in
    ALLOWED_HTTP_STATUSES may be attached to a code.
    """
    if http_status not in ALLOWED_HTTP_STATUSES:
        allowed = ", ".join(str(status) for status in ALLOWED_HTTP_STATUSES)
        raise RegistrationError(
            f"http status {http_status} for code {code} not in `{allowed}`",
            ErrorKind.INVALID_STATUS,
        )
    coder = DefaultCoder(code=code, http_status=http_status, display_text=message, reference=reference)
    registry.must_register(coder)
    return coder


def register_catalog(registry: Registry, entries: Iterable["CodeEntry"]) -> List[DefaultCoder]:
    """
    Register every entry in order. The first failure stops registration and
    propagates; entries registered before it stay registered.
    """
    registered = []
    for entry in entries:
        registered.append(
            register_code(registry, entry.code, entry.http_status, entry.message, entry.reference)
        )
    logger.debug("Registered %d error codes", len(registered))
    return registered
