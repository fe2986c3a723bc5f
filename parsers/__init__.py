from .combined import FieldConversionError, parse_combined_line

__all__ = ["FieldConversionError", "parse_combined_line"]
