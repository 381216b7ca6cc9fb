"""Parse, build and format 128-bit UUIDs, with detailed parse errors."""

__version__ = "0.1.0"

__all__ = ["builder", "errors", "fields", "formats", "identifier", "parser"]