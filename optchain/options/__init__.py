"""
Options package.

Import specific components from their dedicated modules, e.g.:
- `optchain.options.container`
- `optchain.options.binder`
- `optchain.options.auditor`
- `optchain.options.builder`
"""

__all__: list[str] = []
