"""Command-line reminder book with a time-of-day greeting that counts today's reminders."""

__version__ = "0.1.0"