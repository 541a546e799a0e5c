# The two places a transport touches a Headers object:
#
# - on the way out, turning it into a list of (name, value) header lines
# - on the way in, building a fresh one from the header lines received
#
# The line format is the one h11-style HTTP/1.1 libraries use: a list of
# (bytes, bytes) pairs, names lower-cased.
#
# "A recipient MAY combine multiple header fields with the same field name
# into one "field-name: field-value" pair [...] by appending each subsequent
# field value to the combined field value in order, separated by a comma." -
# RFC 7230. Except Set-Cookie, which must go out as one line per cookie, so
# those are fetched with get_all() rather than joined.

from ._headers import DEFAULT_BACKEND, Headers
from ._store import COOKIE_SETTING_NAMES
from ._util import InvalidHeaderError, bytesify

__all__ = ["to_wire_pairs", "from_wire_pairs"]


def _bytesify_value(name, value):
    # Names are tokens, so ascii. Values may carry obs-text, which went
    # through _textify on the way in and has to come back out byte for byte.
    if not isinstance(value, str):
        return bytesify(value)
    try:
        return value.encode("iso-8859-1")
    except UnicodeEncodeError as exc:
        raise InvalidHeaderError(
            "value for header {!r} can't be sent: {}".format(name, exc),
            name=name, value=value) from exc


def to_wire_pairs(headers):
    pairs = []
    for name in headers.keys():
        wire_name = bytesify(name.lower())
        for value in headers.get_all(name):
            pairs.append((wire_name, _bytesify_value(name, value)))
    for name in COOKIE_SETTING_NAMES:
        wire_name = bytesify(name)
        for value in headers.get_all(name):
            pairs.append((wire_name, _bytesify_value(name, value)))
    return pairs


def _textify(s):
    # obs-text is opaque, so any byte has to survive the trip
    if isinstance(s, str):
        return s
    return bytes(s).decode("iso-8859-1")


def from_wire_pairs(pairs, *, backend=DEFAULT_BACKEND):
    headers = Headers(backend=backend)
    for name, value in pairs:
        headers.append(_textify(name), _textify(value))
    return headers
