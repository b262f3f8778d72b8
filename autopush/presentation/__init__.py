"""Presentation layer for the terminal."""

from .console import ConsolePrompter, ConsoleReporter, Spinner

__all__ = ["ConsolePrompter", "ConsoleReporter", "Spinner"]
