# This file must be kept very simple, because it is consumed from several
# places -- it is imported by fetchheaders/__init__.py, execfile'd by setup.py,
# etc.

__version__ = "0.1.0+dev"
