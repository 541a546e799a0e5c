import re

from ._abnf import field_name, padded_field_value

__all__ = ["HeadersError", "InvalidHeaderError",
           "validate_header", "bytesify"]


class HeadersError(Exception):
    """Base class for errors raised by fetchheaders.

    This is an abstract base class; the concrete error is
    :exc:`InvalidHeaderError`. Looking up a header that isn't there is never
    an error -- :meth:`Headers.get` returns ``None`` and
    :meth:`Headers.get_all` returns an empty list.

    """
    def __init__(self, msg):
        if type(self) is HeadersError:
            raise TypeError("tried to directly instantiate HeadersError")
        Exception.__init__(self, msg)


class InvalidHeaderError(HeadersError, ValueError):
    """A header name or value was refused.

    Raised by validating backends (:class:`HeaderList`, or an owned store
    created with ``strict=True``), and by :class:`Delegate` when the object
    it forwards to refuses a name or value.

    .. attribute:: name

       The header name involved, or ``None`` if unknown.

    .. attribute:: value

       The header value involved, or ``None`` if unknown or if the name was
       the problem.

    """
    def __init__(self, msg, name=None, value=None):
        HeadersError.__init__(self, msg)
        self.name = name
        self.value = value


_field_name_re = re.compile(field_name)
_padded_field_value_re = re.compile(padded_field_value)

def validate_header(name, value=None):
    # Names are checked after trimming, since every operation trims them
    # before use. Values may carry optional whitespace around them (set()
    # keeps it, append() strips it), but nothing else.
    if not isinstance(name, str):
        raise InvalidHeaderError(
            "header name must be str, not {}".format(type(name).__name__),
            name=name)
    if not _field_name_re.fullmatch(name.strip()):
        raise InvalidHeaderError(
            "illegal header name {!r}".format(name), name=name)
    if value is None:
        return
    if not isinstance(value, str):
        raise InvalidHeaderError(
            "header value must be str, not {}".format(type(value).__name__),
            name=name, value=value)
    if not _padded_field_value_re.fullmatch(value):
        raise InvalidHeaderError(
            "illegal value for header {!r}: {!r}".format(name, value),
            name=name, value=value)


# Used for header names and values on their way to the wire. Accepts
# ascii-strings, or bytes/bytearray/memoryview/..., and always returns bytes.
def bytesify(s):
    if isinstance(s, str):
        s = s.encode("ascii")
    if isinstance(s, int):
        raise TypeError("expected bytes-like object, not int")
    return bytes(s)
