"""
Custom exception classes for md2html converter.

The line converter itself never raises; these are used by the file and CLI
layers only.
"""


class Md2HtmlError(Exception):
    """Base exception for all md2html errors."""
    pass


class InputError(Md2HtmlError):
    """Input file is missing or has an unsupported extension."""
    pass


class ConversionError(Md2HtmlError):
    """Error while producing or writing HTML output."""
    pass


class SecurityError(Md2HtmlError):
    """Error related to security validation (size limits, etc.)."""
    pass
