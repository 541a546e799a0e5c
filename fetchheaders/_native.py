# The delegating backend, plus the host object it delegates to by default.
#
# A "host" is any object that already implements the Headers contract itself
# -- append, set, delete, get, get_all, has, keys, values, entries,
# get_set_cookie -- with the same observable behaviour as OwnedStore. Delegate
# forwards every call to it, and does nothing else except:
#
# - snapshotting iteration results, so they behave the same as OwnedStore's
# - making sure a refused name/value always comes out as InvalidHeaderError
#
# HeaderList is the host we ship: a flat list of raw (name, value) pairs,
# validated against RFC 7230 on the way in, the way a host-native Headers
# object validates.

import logging

from ._store import COOKIE_SETTING_NAMES, JOIN_SEPARATOR, normalize_name
from ._util import InvalidHeaderError, validate_header

__all__ = ["HeaderList", "Delegate", "HOST_CAPABILITIES"]

logger = logging.getLogger(__name__)

HOST_CAPABILITIES = (
    "append", "set", "delete", "get", "get_all", "has",
    "keys", "values", "entries", "get_set_cookie",
)


# Loosely inspired by werkzeug.datastructures.Headers.
class HeaderList:
    """Headers kept as a list of raw ``(name, value)`` pairs.

    Every name and value is validated on the way in; anything that isn't an
    RFC 7230 token (for names) or field-value (for values) raises
    :exc:`InvalidHeaderError`.

    The first pair for a given lookup key fixes both where that header sorts
    in iteration and the name it is displayed under.

    """

    def __init__(self):
        self._list = []

    def __iter__(self):
        return iter(self._list)

    def append(self, name, value):
        # Raise errors early
        validate_header(name, value)
        self._list.append((name.strip(), value.strip()))

    def set(self, name, value):
        "Replaces all existing values for name with value, in place"
        validate_header(name, value)
        key = normalize_name(name)
        new_list = []
        replaced = False
        for found_name, found_value in self._list:
            if normalize_name(found_name) != key:
                new_list.append((found_name, found_value))
            elif not replaced:
                new_list.append((name.strip(), value))
                replaced = True
        if not replaced:
            new_list.append((name.strip(), value))
        self._list = new_list

    def delete(self, name):
        "Discards all pairs associated with given name"
        key = normalize_name(name)
        self._list = [(found_name, found_value)
                      for (found_name, found_value) in self._list
                      if normalize_name(found_name) != key]

    def get_all(self, name):
        "Gets all values associated with given name"
        key = normalize_name(name)
        return [found_value for (found_name, found_value) in self._list
                if normalize_name(found_name) == key]

    def get(self, name):
        key = normalize_name(name)
        if key in COOKIE_SETTING_NAMES:
            return None
        values = self.get_all(key)
        if not values:
            return None
        return JOIN_SEPARATOR.join(values)

    def has(self, name):
        key = normalize_name(name)
        return any(normalize_name(found_name) == key
                   for (found_name, _) in self._list)

    def _grouped(self):
        # [(display name, [values...]), ...] in order of first appearance,
        # cookie-setting names left out.
        groups = {}
        for found_name, found_value in self._list:
            key = normalize_name(found_name)
            if key in COOKIE_SETTING_NAMES:
                continue
            if key not in groups:
                groups[key] = (found_name, [])
            groups[key][1].append(found_value)
        return list(groups.values())

    def keys(self):
        for display_name, _ in self._grouped():
            yield display_name

    def values(self):
        for _, values in self._grouped():
            yield JOIN_SEPARATOR.join(values)

    def entries(self):
        for display_name, values in self._grouped():
            yield (display_name, JOIN_SEPARATOR.join(values))

    def get_set_cookie(self):
        for key in COOKIE_SETTING_NAMES:
            yield from self.get_all(key)


class Delegate:
    kind = "delegating"

    def __init__(self, host):
        missing = [name for name in HOST_CAPABILITIES
                   if not callable(getattr(host, name, None))]
        if missing:
            raise TypeError(
                "{} can't back Headers: missing {}".format(
                    type(host).__name__, ", ".join(missing)))
        self.host = host

    def _call(self, capability, *args):
        try:
            return getattr(self.host, capability)(*args)
        except InvalidHeaderError:
            raise
        except ValueError as exc:
            # TypeError is left alone: that is a broken host, not a bad header
            logger.debug("%s.%s%r refused by host: %s",
                         type(self.host).__name__, capability, args, exc)
            raise InvalidHeaderError(str(exc), *args) from exc

    def append(self, name, value):
        self._call("append", name, value)

    def set(self, name, value):
        self._call("set", name, value)

    def delete(self, name):
        self._call("delete", name)

    def get(self, name):
        return self._call("get", name)

    def get_all(self, name):
        return list(self._call("get_all", name))

    def has(self, name):
        return bool(self._call("has", name))

    # Hosts may hand back live views or one-shot generators; either way we
    # drain them right now so the caller gets a snapshot.

    def keys(self):
        return iter(list(self._call("keys")))

    def values(self):
        return iter(list(self._call("values")))

    def entries(self):
        return iter([tuple(pair) for pair in self._call("entries")])

    def get_set_cookie(self):
        return iter(list(self._call("get_set_cookie")))
