"""MIDI messages, loggers, TOML profile readers and mapping base types for simulator control."""

__version__ = "0.1.0"