"""Even bill splitting among a group of people."""

__version__ = "0.1.0"
