class DomainError(Exception):
    """Base class for domain-specific errors."""

    pass


class DocumentNotFoundError(DomainError):
    """Exception raised when a document is not found in the database."""

    pass


class SummaryNotFoundError(DomainError):
    """Exception raised when a document has no generated summary yet."""

    pass


class UnsupportedFileTypeError(DomainError):
    """Exception raised when an upload is not one of the accepted formats."""

    pass


class FileTooLargeError(DomainError):
    """Exception raised when an upload exceeds MAX_UPLOAD_BYTES."""

    pass
