import pytest

from .._util import *


def test_HeadersError():
    with pytest.raises(TypeError):
        HeadersError("abstract base class")


def test_InvalidHeaderError():
    try:
        raise InvalidHeaderError("foo")
    except HeadersError as e:
        assert str(e) == "foo"
        assert e.name is None
        assert e.value is None

    # also a ValueError, so generic handlers catch it
    with pytest.raises(ValueError):
        raise InvalidHeaderError("foo", name="a b", value="c")

    e = InvalidHeaderError("foo", name="a b", value="c")
    assert e.name == "a b"
    assert e.value == "c"


def test_validate_header():
    validate_header("Content-Type", "text/html")
    validate_header("X-Weird_Name!#$%&'*+.^`|~", "x")
    # surrounding whitespace on names is ignored
    validate_header(" Accept ", "*/*")
    # values may have interior and surrounding whitespace
    validate_header("foo", "  a  b\tc ")
    validate_header("foo", "")
    # obs-text
    validate_header("foo", "caf\xe9")
    # name alone
    validate_header("foo")

    for bad_name in ["", "   ", "foo bar", "foo:", "föo", "a\nb"]:
        with pytest.raises(InvalidHeaderError) as excinfo:
            validate_header(bad_name, "x")
        assert excinfo.value.name == bad_name

    for bad_value in ["a\r\nb", "a\nb", "a\x00b", "€"]:
        with pytest.raises(InvalidHeaderError) as excinfo:
            validate_header("foo", bad_value)
        assert excinfo.value.name == "foo"
        assert excinfo.value.value == bad_value

    with pytest.raises(InvalidHeaderError):
        validate_header(b"foo", "x")
    with pytest.raises(InvalidHeaderError):
        validate_header("foo", 10)


def test_bytesify():
    assert bytesify(b"123") == b"123"
    assert bytesify(bytearray(b"123")) == b"123"
    assert bytesify("123") == b"123"

    with pytest.raises(UnicodeEncodeError):
        bytesify("ሴ")

    with pytest.raises(TypeError):
        bytesify(10)
