"""dtlfmt — parse, format, and edit DTL rule expressions."""

__version__ = "0.1.0"
