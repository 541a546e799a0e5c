# The public Headers type. It owns exactly one backend, picked when it is
# constructed, and forwards everything to it.

import logging

from ._native import Delegate, HeaderList
from ._store import OwnedStore

__all__ = ["Headers", "DEFAULT_BACKEND"]

logger = logging.getLogger(__name__)

DEFAULT_BACKEND = "owned"


def _make_backend(backend, strict):
    if backend == "owned":
        return OwnedStore(strict=strict)
    if backend == "native":
        return Delegate(HeaderList())
    if isinstance(backend, str):
        raise ValueError(
            "unknown backend {!r}; expected 'owned', 'native', or a host "
            "object".format(backend))
    return Delegate(backend)


def _initial_items(init):
    if init is None:
        return []
    if hasattr(init, "items"):
        return list(init.items())
    return list(init)


class Headers:
    """A case-insensitive, multi-valued, ordered collection of HTTP headers,
    following the semantics of the WHATWG Fetch ``Headers`` class.

    Names are matched case-insensitively (and with surrounding whitespace
    ignored), but each header remembers the name it was first given and
    reports that name when iterated. Adding a value to a name that's already
    present combines them: ``get()`` returns them joined with ``", "``.

    ``Set-Cookie`` and ``Set-Cookie2`` are the exception. Their values must
    never be comma-joined, so ``get()``, ``keys()``, ``values()`` and
    ``entries()`` all act as if they aren't there; use
    :meth:`get_set_cookie` to read them.

    Arguments:

    .. attribute:: init

       Optional initial headers: a mapping, or an iterable of ``(name,
       value)`` pairs. Each one is applied with :meth:`set` after both name
       and value are stripped, so of two names that differ only in case, the
       later one wins.

    .. attribute:: backend

       ``"owned"`` (the default) keeps headers in a dict owned by this
       object. ``"native"`` delegates to a fresh :class:`HeaderList`. Any
       other object is delegated to directly; it must implement the same
       methods as this class (see ``HOST_CAPABILITIES``).

    .. attribute:: strict

       If true, the owned backend rejects malformed names and values with
       :exc:`InvalidHeaderError`, exactly as :class:`HeaderList` does.
       Ignored when delegating, since then the host decides.

    """

    def __init__(self, init=None, *, backend=DEFAULT_BACKEND, strict=False):
        self._backend = _make_backend(backend, strict)
        logger.debug("new Headers with %s backend", self._backend.kind)
        for name, value in _initial_items(init):
            self._backend.set(name.strip(), value.strip())

    @property
    def kind(self):
        "``'owned'`` or ``'delegating'``"
        return self._backend.kind

    def append(self, name, value):
        """Add *value* under *name*, keeping any values already there.

        Both are stripped. If the name is already present, its original
        spelling is kept.

        """
        self._backend.append(name, value)

    def set(self, name, value):
        """Replace every value under *name* with *value*.

        The name is stripped and becomes the new display name; *value* is
        stored as given, without stripping.

        """
        self._backend.set(name, value)

    def delete(self, name):
        "Remove *name* and all its values. Does nothing if it's absent."
        self._backend.delete(name)

    def get(self, name):
        """Return every value under *name* joined with ``", "``.

        Returns ``None`` if the header is absent, and always for
        ``Set-Cookie`` / ``Set-Cookie2``.

        """
        return self._backend.get(name)

    def get_all(self, name):
        """Return a new list of every value under *name*, unjoined.

        Unlike :meth:`get`, this works for cookie-setting names too.

        """
        return self._backend.get_all(name)

    def has(self, name):
        return self._backend.has(name)

    def keys(self):
        return self._backend.keys()

    def values(self):
        return self._backend.values()

    def entries(self):
        return self._backend.entries()

    def get_set_cookie(self):
        """Iterate over all ``Set-Cookie`` values, then all ``Set-Cookie2``
        values, each in the order they were added.

        """
        return self._backend.get_set_cookie()

    def __iter__(self):
        return self.entries()

    def __contains__(self, name):
        return self.has(name)

    def __repr__(self):
        return "{}({}, kind={!r})".format(
            self.__class__.__name__, list(self.entries()), self.kind)

    # Useful for tests, and for checking two backends against each other.
    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return (list(self.entries()) == list(other.entries())
                and list(self.get_set_cookie())
                    == list(other.get_set_cookie()))

    # This is an unhashable type.
    __hash__ = None
