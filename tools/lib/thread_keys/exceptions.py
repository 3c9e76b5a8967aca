"""Custom exceptions for thread_keys library.

This module defines all custom exceptions used throughout the thread_keys
library.
"""


class ThreadKeyError(Exception):
    """Base exception for all thread_keys errors."""


class ParentNotFoundError(ThreadKeyError):
    """Raised when a parent that was resolvable can no longer be found.

    Signals an internal consistency fault, typically the collection being
    mutated while keys are assigned.
    """


class InvalidOptionsError(ThreadKeyError, ValueError):
    """Raised when thread sort options are invalid."""


class ThreadInputError(ThreadKeyError):
    """Raised when thread records cannot be loaded."""
