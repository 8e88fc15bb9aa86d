"""License header checker - find and prepend license headers in source trees."""

__version__ = "0.1.0"
