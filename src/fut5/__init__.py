"""Daily 5-vs-5 team proposals and split consensus."""

__version__ = "0.1.0"
