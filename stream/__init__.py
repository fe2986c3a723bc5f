from .engine import prettify_line, prettify_stream

__all__ = ["prettify_line", "prettify_stream"]
