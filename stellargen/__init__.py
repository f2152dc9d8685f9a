"""Procedural stellar object generation with math, sprite, text and UI batching helpers."""

__version__ = "0.1.0"

__all__ = [
    "complex_number",
    "matrix",
    "sprite",
    "stellar",
    "text",
    "timer",
    "ui_elements",
    "ui_menu",
    "ui_renderer",
    "vector",
]