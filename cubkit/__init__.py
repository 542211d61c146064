"""Text, line-reading, linked-list, image-buffer, colour and XPM utilities."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "colors",
    "convert",
    "image",
    "linked",
    "memory",
    "output",
    "reader",
    "strings",
    "transform",
    "wordtab",
    "xpm",
]