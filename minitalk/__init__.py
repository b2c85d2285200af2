"""Signal-based text messaging between a client and a server process,
with small formatting, string and line-reading helpers."""

__version__ = "0.1.0"