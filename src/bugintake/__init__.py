"""bugintake — structured intake and validation for bug reports."""

__version__ = "0.1.0"
