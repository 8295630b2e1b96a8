"""
Custom exception classes for mddocument.
"""


class MdDocumentError(Exception):
    """Base exception for all mddocument errors."""
    pass


class PandocNotFoundError(MdDocumentError):
    """Pandoc is not installed or cannot be executed."""
    pass


class ConversionError(MdDocumentError):
    """Error raised when a pandoc run fails."""
    pass


class FrontMatterError(MdDocumentError):
    """Front matter that cannot be parsed as YAML."""
    pass
