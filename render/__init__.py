from .engine import DEFAULT_PALETTE, STATUS_CLASSES, Palette, classify_status, colorize, render_line

__all__ = ["DEFAULT_PALETTE", "STATUS_CLASSES", "Palette", "classify_status", "colorize", "render_line"]
