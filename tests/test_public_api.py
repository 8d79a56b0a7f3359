import errchain


def test_end_to_end_through_package_surface():
    registry = errchain.Registry()
    registry.must_register(errchain.DefaultCoder(code=42, http_status=500, display_text="Database error"))

    err = errchain.wrap_c(errchain.wrap(errchain.with_code(42, "db down"), "load failed"), 42, "bind failed")

    assert errchain.is_code(err, 42)
    assert errchain.render(err) == "bind failed"
    full = errchain.render(err, errchain.RenderMode.FULL)
    assert full.index("db down") < full.index("load failed") < full.index("bind failed")
    assert registry.parse_code(err).display_text == "Database error"
    assert errchain.cause(err).message == "db down"


def test_plain_errors_classify_as_unknown():
    coder = errchain.parse_code(errchain.new("x"), registry=errchain.Registry())
    assert coder is errchain.UNKNOWN_CODER
    assert coder.code == errchain.UNKNOWN_CODE == 1
    assert errchain.RESERVED_CODE == 0
