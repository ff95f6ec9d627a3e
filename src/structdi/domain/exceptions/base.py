"""Base exceptions for structdi domain."""


class StructDIError(Exception):
    """Root exception for all structdi errors.

    All domain exceptions inherit from this.
    Allows catching all structdi-specific errors.
    """
