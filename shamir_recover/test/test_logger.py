from shamir_recover import logger


def test_sanitize_redacts_share_material():
    out = logger._sanitize({"x": 3, "y": 12345, "nested": {"digits": "ff", "base": 16}})
    assert out == {"x": 3, "y": "<REDACTED>", "nested": {"digits": "<REDACTED>", "base": 16}}


def test_sanitize_keeps_container_types():
    out = logger._sanitize([{"secret": 1}, ({"k": 3},)])
    assert out == [{"secret": "<REDACTED>"}, ({"k": 3},)]


def test_secure_log_formats_kwargs(caplog):
    with caplog.at_level("INFO", logger="shamir_recover"):
        logger.secure_log("info", "decoded share", x=2, value="abc")
        logger.secure_log("bogus", "plain message")
    assert "decoded share | {'x': 2, 'value': '<REDACTED>'}" in caplog.text
    assert "plain message" in caplog.text
    assert "abc" not in caplog.text
