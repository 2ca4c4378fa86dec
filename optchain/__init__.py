"""
optchain package.

Import concrete functionality from explicit submodules:
- `optchain.options.builder` for building and extending option containers
- `optchain.options.binder` for default-value resolution
- `optchain.options.auditor` for usage auditing
- `optchain.options.scope` for the combined resolve/audit helper
"""

__all__: list[str] = []
