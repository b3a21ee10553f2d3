"""deskscan - XDG desktop entry scanner and launcher."""

__app_name__ = "deskscan"
__version__ = "1.0.0"
