import pytest

from errchain.common.errors import ErrorKind, RegistrationError
from errchain.config import CodeEntry
from errchain.core.catalog import ALLOWED_HTTP_STATUSES, register_catalog, register_code
from errchain.core.chain import with_code


def test_register_code_registers_strictly(registry):
    coder = register_code(registry, 100101, 500, "Database error")
    assert registry.get(100101) is coder
    assert registry.parse_code(with_code(100101, "user not found")).display_text == "Database error"

    with pytest.raises(RegistrationError) as err:
        register_code(registry, 100101, 500, "Database error")
    assert err.value.kind is ErrorKind.DUPLICATE_CODE


@pytest.mark.parametrize("status", [201, 302, 418, 502])
def test_register_code_rejects_unlisted_status(registry, status):
    with pytest.raises(RegistrationError) as err:
        register_code(registry, 100102, status, "nope")
    assert err.value.kind is ErrorKind.INVALID_STATUS
    assert 100102 not in registry


def test_allowed_statuses():
    assert ALLOWED_HTTP_STATUSES == (200, 400, 401, 403, 404, 500)


def test_register_catalog_keeps_order_and_reference(registry):
    entries = [
        CodeEntry(code=100001, http_status=200, message="OK"),
        CodeEntry(code=100003, http_status=400, message="Validation failed", reference="docs/validation.md"),
    ]
    coders = register_catalog(registry, entries)
    assert [coder.code for coder in coders] == [100001, 100003]
    assert registry.get(100003).reference == "docs/validation.md"
    assert len(registry) == 3


def test_register_catalog_stops_at_first_failure(registry):
    entries = [
        CodeEntry(code=100001, http_status=200, message="OK"),
        # 1 is the pre-seeded unknown code
        CodeEntry(code=1, http_status=500, message="Internal server error"),
        CodeEntry(code=100002, http_status=500, message="never reached"),
    ]
    with pytest.raises(RegistrationError):
        register_catalog(registry, entries)
    assert 100001 in registry
    assert 100002 not in registry
