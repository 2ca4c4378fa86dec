"""
Audit policy tags.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class AuditPolicy(str, Enum):
    """How strictly the auditor treats unused options."""

    ERROR = "error"
    WARN = "warn"
    NONE = "none"

    @classmethod
    def parse(cls, value: Union["AuditPolicy", str]) -> "AuditPolicy":
        """Return the policy for a member or its case-insensitive name.

        Raises:
            ValueError: If the value names no policy
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for policy in cls:
                if policy.value == normalized:
                    return policy
        valid = [policy.value for policy in cls]
        raise ValueError(f"Invalid audit policy {value!r}. Must be one of: {valid}")
