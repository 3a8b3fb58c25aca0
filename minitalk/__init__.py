"""Send text between processes bit by bit over SIGUSR1 and SIGUSR2, with small string, line and formatting helpers."""

__version__ = "0.1.0"