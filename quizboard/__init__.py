"""Quiz answer checker with a public rating and a Telegram front door."""

__version__ = "0.1.0"
