"""Output formatting for CLI."""

from ._core import Output, OutputFormat, get_output

__all__ = ["Output", "OutputFormat", "get_output"]
