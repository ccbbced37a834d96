"""RecordKeeper - compliance records archive verification and disposal."""

__version__ = "0.1.0"
