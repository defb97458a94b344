"""
Exceptions raised while opening SAT download packages.
"""
from typing import Optional


class PackageReaderError(Exception):
    """Base class for package reader failures"""
    pass


class ArchiveOpenError(PackageReaderError):
    """
    Raised when a package cannot be opened as a ZIP container.
    The file may be missing, unreadable or not a ZIP file at all.
    """

    def __init__(self, filename: str, reason: Optional[str] = None):
        self.filename = filename
        self.reason = reason
        message = f"Unable to open package as ZIP file: {filename}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class TemporaryFileCreationError(PackageReaderError):
    """Raised when package contents cannot be written to a temporary file"""
    pass
