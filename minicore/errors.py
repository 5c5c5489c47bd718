class MiniCoreError(Exception):
    """Base exception for minicore errors."""


class DbQueryError(MiniCoreError):
    """Any failure while running a statement through the gateway."""


class UnknownConnectionError(MiniCoreError):
    """No engine is registered under the requested connection name."""
