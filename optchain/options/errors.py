"""
Exception classes for the options container and its protocols.
"""

from typing import Iterable, List


class OptionsError(Exception):
    """Base exception for options container errors."""
    pass


class DuplicateKeyError(OptionsError):
    """Raised when an initial entry list repeats a key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Option '{key}' was supplied more than once")


class KeyNotFoundError(OptionsError, KeyError):
    """Raised when an accessor is used on a key the container does not hold."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Option '{self.key}' is not present in the container"


class UnusedOptionsError(OptionsError):
    """Raised by the auditor under the error policy.

    Attributes:
        keys: Offending option names in container insertion order
    """

    def __init__(self, keys: Iterable[str]):
        self.keys: List[str] = list(keys)
        listed = ", ".join(repr(key) for key in self.keys)
        super().__init__(f"Unused options: {listed}")
