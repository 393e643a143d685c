"""Run a chain of commands between an input file or here-document and an output file."""

__version__ = "0.1.0"