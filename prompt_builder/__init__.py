"""Event context normalization and prompt synthesis for the GitHub agent."""

__version__ = "0.1.0"
