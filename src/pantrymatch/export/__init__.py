"""Export module for formatting evaluation results."""

from pantrymatch.export.formatters import OUTPUT_FORMATS, format_result

__all__ = ["OUTPUT_FORMATS", "format_result"]
