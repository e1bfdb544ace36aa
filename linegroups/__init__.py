"""Group delimited digit rows that share a token at a recurring column."""

__version__ = "0.1.0"
