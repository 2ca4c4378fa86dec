"""
Usage auditing for option containers.

A key is accountable to an audit only once it is claimed: supplied when the
container was built, or processed by some resolution in the chain. Keys added
through extension stay exempt until a descendant resolves them, so the
function injecting them is never blamed for not reading them itself.
"""

from typing import List, Optional

from optchain.logger import UnifiedLogger
from .container import OptionsContainer
from .errors import UnusedOptionsError
from .policy import AuditPolicy

# Create module logger
logger = UnifiedLogger(tag="options-auditor")


class UsageAuditor:
    """Reports unused options according to the container's policy."""

    def unused_keys(self, container: OptionsContainer, *, final: bool = False) -> List[str]:
        """Return the keys an audit of ``container`` would report.

        Args:
            container: Container to inspect
            final: True for the top-level owner's audit after the chain returned;
                only then are never-resolved extension keys included, and only
                when the container was built with ``flag_unresolved_extensions``
        """
        unused = container.unused_claimed_keys()
        if final and container.flag_unresolved_extensions:
            reported = set(unused) | set(container.unresolved_extension_keys())
            # Keep container insertion order across both groups
            unused = [key for key in container.keys() if key in reported]
        return unused

    def check(self, container: Optional[OptionsContainer], *, final: bool = False) -> List[str]:
        """Audit a container at the end of a function's use of it.

        Args:
            container: Container to audit; None is a no-op
            final: See ``unused_keys``

        Returns:
            The unused keys that were reported (empty when all were consumed)

        Raises:
            UnusedOptionsError: If keys are unused and the policy is ``error``
        """
        if container is None:
            return []

        unused = self.unused_keys(container, final=final)
        if not unused:
            return []

        policy = container.policy
        if policy is AuditPolicy.ERROR:
            raise UnusedOptionsError(unused)
        if policy is AuditPolicy.WARN:
            logger.warning("Unused options: {keys}", keys=unused, final=final)
        return unused


_default_auditor = UsageAuditor()


def check_usage(container: Optional[OptionsContainer], *, final: bool = False) -> List[str]:
    """Audit with the shared auditor instance."""
    return _default_auditor.check(container, final=final)
