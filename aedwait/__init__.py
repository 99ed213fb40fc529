"""Hospital Authority A&E waiting-time command-line client."""

__version__ = "0.1.0"
