"""Custom exceptions for mongodocs."""


class MongoDocsError(Exception):
    """Base exception for mongodocs operations."""


class ContentNotFoundError(MongoDocsError):
    """Requested article does not exist in the content store."""


class FrontmatterError(MongoDocsError):
    """Front matter block could not be parsed."""

class ContentDecodeError(MongoDocsError):
    """Article file is not valid UTF-8 text."""
