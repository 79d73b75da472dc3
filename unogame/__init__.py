"""Terminal UNO: rules engine and turn loop."""

__version__ = "0.1.0"
