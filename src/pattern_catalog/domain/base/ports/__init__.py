"""Domain ports."""

from .example_port import OutputSink, PatternExample

__all__ = ["OutputSink", "PatternExample"]
