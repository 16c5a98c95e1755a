"""Faros - a hierarchical TODO list manager for the command line."""

__version__ = "0.2.0"
