"""verdict: assertion checks for unit tests."""

__version__ = "0.1.0"
