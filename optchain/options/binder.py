"""
Default-value resolution against a shared options container.

Declarations are evaluated left to right. A callable default is a thunk that
receives a read-only mapping of the names already bound by the same call, so
``("b", lambda bound: 2 * bound["a"] + 1)`` sees whatever ``a`` resolved to.
Any other object is bound literally; wrap callables with ``constant`` to bind
them as values.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Optional

from optchain.logger import UnifiedLogger
from .container import EntryPairs, OptionsContainer, iter_entry_pairs

# Create module logger
logger = UnifiedLogger(tag="options-binder")


class constant:
    """Default wrapper bound as-is, even when the wrapped value is callable."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __repr__(self) -> str:
        return f"constant({self.value!r})"


def _evaluate_default(default: Any, bound: Dict[str, Any]) -> Any:
    if isinstance(default, constant):
        return default.value
    if callable(default):
        return default(MappingProxyType(bound))
    return default


class DefaultsBinder:
    """Resolves a function's declared option names against a container."""

    def resolve(self, container: Optional[OptionsContainer], declarations: EntryPairs) -> Dict[str, Any]:
        """Bind every declared name, preferring values present in the container.

        Present keys are read, then marked used and claimed. Absent keys get
        their default and the container is left untouched.

        Args:
            container: Shared container, or None when the caller passed no options
            declarations: Ordered ``(name, default)`` pairs or a mapping

        Returns:
            Mapping of declared name to bound value

        Raises:
            Whatever a default thunk raises, unchanged
        """
        bound: Dict[str, Any] = {}
        for name, default in iter_entry_pairs(declarations):
            if container is not None and container.has(name):
                bound[name] = container.get_raw(name)
                container.mark_used(name)
                container.mark_claimed(name)
            else:
                bound[name] = _evaluate_default(default, bound)

        if container is not None:
            logger.debug(
                "Resolved {declared} against container",
                declared=list(bound),
                from_container=[name for name in bound if container.has(name)],
            )
        return bound


_default_binder = DefaultsBinder()


def resolve_defaults(container: Optional[OptionsContainer], declarations: EntryPairs) -> Dict[str, Any]:
    """Resolve declarations with the shared binder instance."""
    return _default_binder.resolve(container, declarations)
