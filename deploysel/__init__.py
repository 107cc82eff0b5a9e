"""Deploy Selector — resolve deployment targets from ambiguous input."""

__version__ = "0.1.0"
