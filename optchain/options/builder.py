"""
Construction and extension of option containers.

Policy and extension-audit behaviour default to the configured settings when
the caller does not pass them explicitly.
"""

from typing import Optional, Union

from optchain.logger import UnifiedLogger
from optchain.settings import get_default_policy, get_flag_unresolved_extensions
from .container import EntryPairs, OptionsContainer, iter_entry_pairs
from .policy import AuditPolicy

# Create module logger
logger = UnifiedLogger(tag="options-builder")


class OptionsBuilder:
    """Builds new containers and forwards new options into existing ones."""

    @logger.trace("options-builder:build")
    def build(
        self,
        entries: Optional[EntryPairs] = None,
        policy: Optional[Union[AuditPolicy, str]] = None,
        *,
        flag_unresolved_extensions: Optional[bool] = None,
    ) -> OptionsContainer:
        """Create a container from user-supplied options.

        Args:
            entries: Ordered ``(key, value)`` pairs or a mapping
            policy: Audit policy; None uses the configured default
            flag_unresolved_extensions: Whether a final audit reports extension
                keys nobody resolved; None uses the configured default

        Raises:
            DuplicateKeyError: If a key repeats in ``entries``
        """
        if policy is None:
            policy = get_default_policy()
        if flag_unresolved_extensions is None:
            flag_unresolved_extensions = get_flag_unresolved_extensions()
        return OptionsContainer.create(
            entries,
            policy,
            flag_unresolved_extensions=flag_unresolved_extensions,
        )

    def extend(self, container: OptionsContainer, new_entries: EntryPairs) -> OptionsContainer:
        """Add options meant for a descendant, or override existing values.

        New keys start unclaimed and unused. Existing keys keep their flags so a
        descendant is still credited once it resolves them.

        Returns:
            The same container instance
        """
        added = []
        for key, value in iter_entry_pairs(new_entries):
            if not container.has(key):
                added.append(key)
            container.add_or_update(key, value)
        logger.debug("Extended container with {added}", added=added)
        return container


_default_builder = OptionsBuilder()


def build_options(
    entries: Optional[EntryPairs] = None,
    policy: Optional[Union[AuditPolicy, str]] = None,
    *,
    flag_unresolved_extensions: Optional[bool] = None,
) -> OptionsContainer:
    """Build a container with the shared builder instance."""
    return _default_builder.build(
        entries,
        policy,
        flag_unresolved_extensions=flag_unresolved_extensions,
    )


def extend_options(container: OptionsContainer, new_entries: EntryPairs) -> OptionsContainer:
    """Extend a container with the shared builder instance."""
    return _default_builder.extend(container, new_entries)
