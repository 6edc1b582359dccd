"""In-memory account ledger served over HTTP."""

__version__ = "1.0.0"
