"""PII detection, column uniqueness checks and key scrambling for partitioned data sets."""

__version__ = "0.1.0"
__all__ = ["models", "pii", "scramble", "uniqueness"]