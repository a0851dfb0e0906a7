"""SplitBetter: group expense splitting and settlement engine."""

__version__ = "0.1.0"
