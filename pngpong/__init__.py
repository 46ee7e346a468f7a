"""Hide and retrieve messages in PNG files by adding and reading custom chunks."""

__version__ = "0.1.0"