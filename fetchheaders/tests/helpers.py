from .._headers import Headers

BACKENDS = ["owned", "native"]

# Everything a caller can observe about a Headers object without mutating it.
def observe(headers):
    return {
        "keys": list(headers.keys()),
        "values": list(headers.values()),
        "entries": list(headers.entries()),
        "set_cookie": list(headers.get_set_cookie()),
    }

# Probes run after every step of SCRIPT, against every backend.
PROBE_NAMES = [
    "x", "X", " x ", "accept", "ACCEPT", "content-type", "Set-Cookie",
    "set-cookie2", "missing",
]

def probe(headers):
    return {
        name: (headers.get(name), headers.has(name), headers.get_all(name))
        for name in PROBE_NAMES
    }

# (method, args) pairs, covering the edge cases that are easiest to get
# subtly wrong.
SCRIPT = [
    ("append", ("X", "a")),
    ("append", ("x", " b ")),
    ("append", ("Accept", "text/html")),
    ("append", ("Set-Cookie2", "legacy=1")),
    ("append", ("Set-Cookie", "a=1; Path=/")),
    ("append", ("ACCEPT", "application/json")),
    ("append", ("set-cookie", "b=2")),
    ("set", ("Content-Type", " text/plain ")),
    ("set", ("x", "replaced")),
    ("append", (" X ", "again")),
    ("delete", ("accept",)),
    ("append", ("Accept", "*/*")),
    ("delete", ("missing",)),
    ("set", ("SET-COOKIE", "c=3")),
    ("delete", ("Set-Cookie2",)),
    ("append", ("Set-Cookie2", "legacy=2")),
]

def run_script(backend, **kwargs):
    headers = Headers(backend=backend, **kwargs)
    steps = []
    for method, args in SCRIPT:
        getattr(headers, method)(*args)
        steps.append((observe(headers), probe(headers)))
    return headers, steps
