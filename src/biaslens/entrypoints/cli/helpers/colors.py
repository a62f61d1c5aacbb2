"""Conversion of the catalog's ``#RRGGBB`` colors for `click.style`."""


def rgb(hex_color: str) -> tuple[int, int, int]:
    """Return ``(r, g, b)`` for a ``#RRGGBB`` string."""
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #RRGGBB, got {hex_color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
