"""The eleven pattern units.

Each unit module marks its example class for discovery when imported, and is
also runnable on its own, e.g. ``python -m pattern_catalog.patterns.strategy``.
Modules are imported by discovery rather than here, so running one as a
script does not import it twice.
"""

PATTERN_MODULES = [
    "singleton",
    "factory",
    "observer",
    "strategy",
    "decorator",
    "adapter",
    "command",
    "proxy",
    "facade",
    "composite",
    "builder",
]

__all__ = ["PATTERN_MODULES"]
