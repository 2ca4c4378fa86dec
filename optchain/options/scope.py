"""
Combined resolve/audit lifecycle for one function's use of a container.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from optchain.logger import UnifiedLogger
from .auditor import check_usage
from .binder import resolve_defaults
from .container import EntryPairs, OptionsContainer

# Create module logger
logger = UnifiedLogger(tag="options-scope")


@contextmanager
def option_scope(
    container: Optional[OptionsContainer],
    declarations: EntryPairs,
    *,
    final: bool = False,
) -> Iterator[Dict[str, Any]]:
    """
    Resolve declarations on entry and audit the container on normal exit.

    If the body raises, no audit runs and the exception propagates unchanged.

    Usage:
        def render(options=None):
            with option_scope(options, [("width", 80)]) as bound:
                layout(bound["width"], options)
    """
    with logger.span("option_scope", final=final):
        bound = resolve_defaults(container, declarations)
        yield bound
        check_usage(container, final=final)
