# An implementation of the WHATWG Fetch "Headers" type: a case-insensitive,
# multi-valued, ordered collection of HTTP header fields, with the
# Set-Cookie carve-out the standard requires. It contains no networking code
# at all; _wire has the two helpers a transport needs to move headers on and
# off the wire.
#
# Two interchangeable backends sit behind the one Headers class: a dict owned
# by the Headers object, or any host object implementing the same methods
# (HeaderList being the one we ship). Pick one when constructing.

from ._util import HeadersError, InvalidHeaderError
from ._headers import *
from ._native import *
from ._store import *
from ._wire import *
from ._version import __version__

__all__ = ["HeadersError", "InvalidHeaderError"]
__all__ += _headers.__all__
__all__ += _native.__all__
__all__ += _store.__all__
__all__ += _wire.__all__
