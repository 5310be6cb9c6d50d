"""
Custom exceptions for the txleg_core storage and CLI layers.

The parsers never raise on bad input (they return empty/default results), so
these only cover the layers around them: reading bill files, loading config,
and persisting parse results.
"""


class TxLegError(Exception):
    """Base exception for txleg_core errors."""
    pass


class BillTextError(TxLegError):
    """Bill text file could not be read or decoded."""
    pass


class ParseStoreError(TxLegError):
    """Saving or loading a parse result from the database failed."""
    pass


class ConfigError(TxLegError):
    """Config file contains an invalid parser setting."""
    pass
