"""fixcode: send a source file to an LLM and get a fixed version back."""

__version__ = "0.1.0"
