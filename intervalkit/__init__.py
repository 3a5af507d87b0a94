"""Closed intervals, typed variable boxes, prioritised option values and numeric helpers."""

__version__ = "0.1.0"

__all__ = [
    "box",
    "filesystem",
    "interval",
    "numeric",
    "option_value",
    "string_to_interval",
]