"""Browser end-to-end suite for the portfolio website."""

__version__ = "1.0.0"
