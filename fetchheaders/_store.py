# The owned backend: a plain dict from lookup key to Entry.
#
# Facts:
#
# Lookup keys are names with surrounding whitespace stripped, lower-cased. The
# name as first supplied (stripped) is kept for display, so
#
#   append("Accept", "a"); append("ACCEPT", "b")
#
# gives one entry displayed as "Accept" with values ["a", "b"].
#
# "A sender MUST NOT generate multiple header fields with the same field name
# in a message unless either the entire field value for that header field is
# defined as a comma-separated list [or the header is Set-Cookie which gets a
# special exception]" - RFC 7230. (cookies are in RFC 6265)
#
# So every header aside from Set-Cookie can be merged by ", ".join. Set-Cookie
# (and the obsolete Set-Cookie2 from RFC 2965) can't, so they are hidden from
# get() and the iteration methods and only come out of get_set_cookie(), one
# value at a time.
#
# Dict order is the iteration order: assigning to an existing key keeps its
# place, deleting and re-adding moves it to the end.

from ._util import validate_header

__all__ = ["COOKIE_SETTING_NAMES", "JOIN_SEPARATOR", "Entry", "OwnedStore"]

COOKIE_SETTING_NAMES = ("set-cookie", "set-cookie2")

JOIN_SEPARATOR = ", "


def normalize_name(name):
    return name.strip().lower()

def is_cookie_setting(key):
    return key in COOKIE_SETTING_NAMES


class Entry:
    """All values stored under names that share one lookup key.

    .. attribute:: display_name

       The name as first supplied, with surrounding whitespace stripped.

    .. attribute:: values

       A list of every value, in the order they were added. Never empty.

    """

    __slots__ = ("display_name", "values")

    def __init__(self, display_name, values):
        self.display_name = display_name
        self.values = values

    def joined(self):
        return JOIN_SEPARATOR.join(self.values)

    def __repr__(self):
        return "{}(display_name={!r}, values={!r})".format(
            self.__class__.__name__, self.display_name, self.values)

    # Useful for tests
    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return (self.display_name == other.display_name
                and self.values == other.values)

    # This is an unhashable type.
    __hash__ = None


class OwnedStore:
    kind = "owned"

    def __init__(self, strict=False):
        self._entries = {}
        self._strict = strict

    def append(self, name, value):
        if self._strict:
            validate_header(name, value)
        key = normalize_name(name)
        entry = self._entries.get(key)
        if entry is None:
            self._entries[key] = Entry(name.strip(), [value.strip()])
        else:
            entry.values.append(value.strip())

    def set(self, name, value):
        if self._strict:
            validate_header(name, value)
        # value is deliberately left untrimmed here, unlike append()
        self._entries[normalize_name(name)] = Entry(name.strip(), [value])

    def delete(self, name):
        self._entries.pop(normalize_name(name), None)

    def get(self, name):
        key = normalize_name(name)
        if is_cookie_setting(key):
            return None
        entry = self._entries.get(key)
        if entry is None:
            return None
        return entry.joined()

    def get_all(self, name):
        entry = self._entries.get(normalize_name(name))
        if entry is None:
            return []
        return list(entry.values)

    def has(self, name):
        return normalize_name(name) in self._entries

    # The iteration methods snapshot the store when called, and hand back an
    # iterator over the snapshot. So later mutations never leak into (or
    # blow up) an iteration that's already in progress.

    def _visible(self):
        return [entry for key, entry in self._entries.items()
                if not is_cookie_setting(key)]

    def keys(self):
        return iter([entry.display_name for entry in self._visible()])

    def values(self):
        return iter([entry.joined() for entry in self._visible()])

    def entries(self):
        return iter([(entry.display_name, entry.joined())
                     for entry in self._visible()])

    def get_set_cookie(self):
        cookies = []
        for key in COOKIE_SETTING_NAMES:
            entry = self._entries.get(key)
            if entry is not None:
                cookies.extend(entry.values)
        return iter(cookies)
