"""Vector operations, coordinate conversions, a dense matrix type and matrix rank in pure Python."""

__version__ = "1.0.0"