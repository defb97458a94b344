"""
ZIP container access.
Every traversal builds a fresh generator over the central directory,
so iterating twice never resumes a previous cursor.
"""
import logging
import weakref
import zipfile
from typing import Generator, Tuple

from sat_package_reader.core.exceptions import ArchiveOpenError
from sat_package_reader.core.source import ArchiveSource


logger = logging.getLogger(__name__)


def _release(archive: zipfile.ZipFile, filename: str, is_temporary: bool) -> None:
    archive.close()
    ArchiveSource.release(filename, is_temporary)


class ArchiveReader:
    """
    Opened ZIP container.
    Owns the container and, when is_temporary, the file it was read from.
    """

    def __init__(self, archive: zipfile.ZipFile, filename: str, is_temporary: bool = False):
        self._archive = archive
        self.filename = filename
        self.is_temporary = is_temporary
        # runs once: on close(), garbage collection or interpreter exit
        self._finalizer = weakref.finalize(self, _release, archive, filename, is_temporary)

    @classmethod
    def open(cls, filename: str, is_temporary: bool = False) -> 'ArchiveReader':
        """
        Open filename as a ZIP container.

        Args:
            filename: Path of the ZIP file
            is_temporary: Whether the file must be removed on release

        Returns:
            ArchiveReader

        Raises:
            ArchiveOpenError: If the file is missing, unreadable or not a ZIP file
        """
        try:
            archive = zipfile.ZipFile(filename, 'r')
        except (OSError, EOFError, zipfile.BadZipFile) as e:
            ArchiveSource.release(filename, is_temporary)
            raise ArchiveOpenError(filename, str(e)) from e

        logger.debug(f"Opened package {filename} with {len(archive.infolist())} entries")
        return cls(archive, filename, is_temporary)

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def close(self) -> None:
        """Close the container and remove the temporary file, if any"""
        self._finalizer()

    def _ensure_open(self):
        if self.closed:
            raise ValueError(f"I/O operation on closed package: {self.filename}")

    def count(self) -> int:
        """Number of physical entries, directories included"""
        self._ensure_open()
        return len(self._archive.infolist())

    def infos(self) -> Generator[zipfile.ZipInfo, None, None]:
        """Yield non-directory entries in container order"""
        self._ensure_open()
        for info in self._archive.infolist():
            if info.is_dir():
                continue
            yield info

    def read(self, info: zipfile.ZipInfo) -> bytes:
        self._ensure_open()
        return self._archive.read(info)

    def entries(self) -> Generator[Tuple[str, bytes], None, None]:
        """
        Yield (name, content) for every file in the container.

        Example:
            for name, content in archive.entries():
                print(name, len(content))
        """
        for info in self.infos():
            yield info.filename, self.read(info)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __repr__(self) -> str:
        state = 'closed' if self.closed else 'open'
        return f"<ArchiveReader {self.filename!r} ({state})>"
