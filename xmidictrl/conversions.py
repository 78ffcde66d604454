"""Conversion helpers."""


def int_to_string(number: int, length: int) -> str:
    """Return the number padded on the left with zeros to the given width."""
    return f"{number:0>{length}}"