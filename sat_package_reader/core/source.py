"""
Materialization of in-memory package contents into temporary files.
"""
import contextlib
import logging
import os
import tempfile
from typing import Optional

from sat_package_reader.core.exceptions import TemporaryFileCreationError


logger = logging.getLogger(__name__)


class ArchiveSource:
    """
    Resolves raw package contents into a file path that zipfile can open,
    and removes that file once the package is no longer needed.
    """

    PREFIX = 'sat-package-'
    SUFFIX = '.zip'

    @classmethod
    def resolve(cls, content: bytes, directory: Optional[str] = None) -> str:
        """
        Write content to a new temporary file and return its path.

        Args:
            content: Raw bytes of the package
            directory: Where to create the file (platform temp dir by default)

        Returns:
            Path of the temporary file

        Raises:
            TemporaryFileCreationError: If the file cannot be created or written
        """
        try:
            fd, path = tempfile.mkstemp(prefix=cls.PREFIX, suffix=cls.SUFFIX, dir=directory)
        except OSError as e:
            raise TemporaryFileCreationError(
                f"Cannot create temporary file: {str(e)}"
            ) from e

        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(content)
                f.flush()
        except (OSError, TypeError) as e:
            cls.release(path, True)
            raise TemporaryFileCreationError(
                f"Cannot write temporary file {path}: {str(e)}"
            ) from e

        logger.debug(f"Package contents ({len(content)} bytes) written to {path}")
        return path

    @staticmethod
    def release(path: str, is_temporary: bool) -> None:
        """Remove path when it is a temporary file; already removed files are fine"""
        if not is_temporary:
            return

        with contextlib.suppress(FileNotFoundError):
            os.remove(path)
            logger.debug(f"Temporary package removed: {path}")
