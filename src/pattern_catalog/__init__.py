"""Pattern Catalog - Root Package.

This package is a catalog of eleven classic object-oriented design patterns
(Singleton, Factory, Observer, Strategy, Decorator, Adapter, Command, Proxy,
Facade, Composite, Builder). Each pattern unit carries a description, its
trade-offs and a minimal runnable example with documented sample output.

Key Components:
    - domain: Pattern unit model, example port and exceptions
    - patterns: The eleven self-contained pattern units
    - application: Catalog service and registration decorator
    - infrastructure: Logging, singleton access and the pattern registry
    - config: Configuration schemas and loading
    - interface / cli: Command-line entry points and output formatting

Usage:
    >>> pattern-catalog patterns list
    >>> pattern-catalog patterns run strategy
    >>> python -m pattern_catalog.patterns.decorator
"""

__version__ = "1.0.0"
PACKAGE_NAME = "pattern-catalog"
