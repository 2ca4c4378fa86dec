"""
Shared option container for a call chain.

Mental model:
- OptionsContainer is the single mutable store handed down the chain.
- Entries inside it are named options carrying usage metadata.
- Every function in the chain mutates the same instance; never copy it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .errors import DuplicateKeyError, KeyNotFoundError
from .policy import AuditPolicy


EntryPairs = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


@dataclass
class OptionEntry:
    """Single option record stored inside the container."""
    value: Any
    used: bool = False
    claimed: bool = False


def iter_entry_pairs(entries: Optional[EntryPairs]) -> Iterator[Tuple[str, Any]]:
    """Yield ``(key, value)`` pairs from a mapping or an ordered pair list."""
    if entries is None:
        return
    if isinstance(entries, Mapping):
        yield from entries.items()
        return
    for pair in entries:
        key, value = pair
        yield key, value


def _validate_key(key: Any) -> str:
    if not isinstance(key, str) or not key:
        raise ValueError(f"Option name must be a non-empty string, got {key!r}")
    return key


class OptionsContainer:
    """Ordered key/value store with per-key usage and claim flags."""

    def __init__(
        self,
        policy: Union[AuditPolicy, str] = AuditPolicy.ERROR,
        *,
        flag_unresolved_extensions: bool = False,
    ) -> None:
        self._entries: Dict[str, OptionEntry] = {}
        self._policy = AuditPolicy.parse(policy)
        self._flag_unresolved_extensions = bool(flag_unresolved_extensions)

    @classmethod
    def create(
        cls,
        entries: Optional[EntryPairs] = None,
        policy: Union[AuditPolicy, str] = AuditPolicy.ERROR,
        *,
        flag_unresolved_extensions: bool = False,
    ) -> "OptionsContainer":
        """Build a container whose supplied keys start unused and claimed.

        Raises:
            DuplicateKeyError: If the same key appears twice in ``entries``
            ValueError: If a key is not a non-empty string or the policy is unknown
        """
        container = cls(policy, flag_unresolved_extensions=flag_unresolved_extensions)
        for key, value in iter_entry_pairs(entries):
            _validate_key(key)
            if key in container._entries:
                raise DuplicateKeyError(key)
            container._entries[key] = OptionEntry(value=value, used=False, claimed=True)
        return container

    @property
    def policy(self) -> AuditPolicy:
        return self._policy

    @property
    def flag_unresolved_extensions(self) -> bool:
        return self._flag_unresolved_extensions

    def _require(self, key: str) -> OptionEntry:
        entry = self._entries.get(key)
        if entry is None:
            raise KeyNotFoundError(key)
        return entry

    def has(self, key: str) -> bool:
        return key in self._entries

    def get_raw(self, key: str) -> Any:
        """Return the stored value without marking it used."""
        return self._require(key).value

    def mark_used(self, key: str) -> None:
        self._require(key).used = True

    def mark_claimed(self, key: str) -> None:
        self._require(key).claimed = True

    def add_or_update(self, key: str, value: Any) -> None:
        """Replace an existing value in place, or insert a new unclaimed entry.

        Updating never resets the ``used``/``claimed`` flags of an existing key.
        """
        entry = self._entries.get(key)
        if entry is not None:
            entry.value = value
            return
        _validate_key(key)
        self._entries[key] = OptionEntry(value=value, used=False, claimed=False)

    def unused_claimed_keys(self) -> List[str]:
        """Keys the current scope is accountable for that nobody has read yet."""
        return [key for key, entry in self._entries.items() if entry.claimed and not entry.used]

    def unresolved_extension_keys(self) -> List[str]:
        """Keys added through extension that no resolution has processed."""
        return [key for key, entry in self._entries.items() if not entry.claimed and not entry.used]

    # Diagnostics

    def keys(self) -> List[str]:
        return list(self._entries)

    def entry(self, key: str) -> OptionEntry:
        """Return a copy of the record for ``key``."""
        return replace(self._require(key))

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        """Return an ordered, detached view of every record."""
        return {
            key: {"value": entry.value, "used": entry.used, "claimed": entry.claimed}
            for key, entry in self._entries.items()
        }

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"OptionsContainer(policy={self._policy.value}, keys={list(self._entries)})"
