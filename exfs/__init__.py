"""exfs: process execution, scratch-file editing and upward file lookup for CLI tools."""

__version__ = "0.1.0"
