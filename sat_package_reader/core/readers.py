"""
Package readers for the ZIP files delivered by the SAT bulk download service.

CfdiPackageReader exposes the CFDI documents of a package,
MetadataPackageReader exposes the rows of its metadata listings.
"""
import logging
import re
import zipfile
from typing import Dict, Generator, Optional, Tuple

from sat_package_reader.core.archive import ArchiveReader
from sat_package_reader.core.extractors import obtain_uuid_from_xml_cfdi
from sat_package_reader.core.metadata import parse_metadata_contents
from sat_package_reader.core.models import (
    CfdiPackageSnapshot,
    MetadataItem,
    MetadataPackageSnapshot,
    PackageSnapshot,
)
from sat_package_reader.core.source import ArchiveSource
from sat_package_reader.utils.decorators import audit_log, measure_performance, performance_context


logger = logging.getLogger(__name__)

PATH_SEPARATORS = re.compile(r'[/\\]')


class PackageReader:
    """
    Base reader: filters the files of an archive by name and size.
    Subclasses set the accepted extension.
    """

    extension = ''
    reserved_directories = ('__MACOSX',)

    def __init__(self, archive: ArchiveReader):
        self.archive = archive

    @classmethod
    @audit_log
    def create_from_file(cls, filename: str):
        """
        Open a ZIP file as a package.

        Raises:
            ArchiveOpenError: If the file cannot be opened as ZIP
        """
        return cls(ArchiveReader.open(str(filename)))

    @classmethod
    @audit_log
    def create_from_contents(cls, content: bytes, temporary_directory: Optional[str] = None):
        """
        Open raw ZIP contents as a package.
        Contents are written to a temporary file that is removed on close.

        Raises:
            TemporaryFileCreationError: If the temporary file cannot be written
            ArchiveOpenError: If the contents are not a ZIP file
        """
        filename = ArchiveSource.resolve(content, temporary_directory)
        return cls(ArchiveReader.open(filename, is_temporary=True))

    @property
    def filename(self) -> str:
        return self.archive.filename

    @property
    def is_temporary(self) -> bool:
        return self.archive.is_temporary

    @property
    def entry_count(self) -> int:
        """Raw number of entries in the container"""
        return self.archive.count()

    def filter_entry(self, info: zipfile.ZipInfo) -> bool:
        """Whether a container entry is part of this package"""
        name = info.filename
        segments = PATH_SEPARATORS.split(name)
        if any(segment in self.reserved_directories for segment in segments):
            return False
        if not name.endswith(self.extension):
            return False
        return info.file_size > 0

    def _accepted_infos(self) -> Generator[zipfile.ZipInfo, None, None]:
        for info in self.archive.infos():
            if self.filter_entry(info):
                yield info

    def file_contents(self) -> Generator[Tuple[str, bytes], None, None]:
        """Yield (name, content) of accepted files in container order"""
        for info in self._accepted_infos():
            yield info.filename, self.archive.read(info)

    def count(self) -> int:
        """Number of accepted files"""
        return sum(1 for _ in self._accepted_infos())

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        # a package without documents is still an opened package
        return True

    def to_snapshot(self) -> PackageSnapshot:
        return PackageSnapshot(source=self.filename, files=dict(self.file_contents()))

    def json_serialize(self) -> dict:
        """JSON-encodable snapshot, file contents as base64 strings"""
        return self.to_snapshot().model_dump(mode='json')

    def close(self) -> None:
        self.archive.close()

    @property
    def closed(self) -> bool:
        return self.archive.closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.filename!r}>"


class CfdiPackageReader(PackageReader):
    """
    Reader for packages of CFDI documents (.xml files).

    Usage:
        with CfdiPackageReader.create_from_contents(zip_bytes) as reader:
            for uuid, content in reader.cfdis():
                ...
    """

    extension = '.xml'

    obtain_uuid_from_xml_cfdi = staticmethod(obtain_uuid_from_xml_cfdi)

    def documents(self) -> Generator[Tuple[str, bytes], None, None]:
        """Yield (name, content) of each CFDI file"""
        return self.file_contents()

    def cfdis(self) -> Generator[Tuple[str, bytes], None, None]:
        """Yield (uuid, content) of each CFDI; uuid is empty when not found"""
        for name, content in self.file_contents():
            uuid = self.obtain_uuid_from_xml_cfdi(content)
            if not uuid:
                logger.debug(f"No UUID found in {name}")
            yield uuid, content

    def identifier_index(self) -> Dict[str, bytes]:
        """
        Map of UUID to content for documents with a UUID.
        When two documents share a UUID the last one in the package wins.
        """
        index = {}
        for uuid, content in self.cfdis():
            if not uuid:
                continue
            if uuid in index:
                logger.warning(f"Duplicated UUID {uuid} in {self.filename}")
            index[uuid] = content
        return index

    @measure_performance
    def to_snapshot(self) -> CfdiPackageSnapshot:
        files = dict(self.file_contents())
        with performance_context(f"identifier index of {self.filename}"):
            documents = self.identifier_index()
        return CfdiPackageSnapshot(source=self.filename, files=files, documents=documents)


class MetadataPackageReader(PackageReader):
    """Reader for packages of metadata listings (.txt files)"""

    extension = '.txt'

    def metadata(self) -> Generator[Tuple[str, MetadataItem], None, None]:
        """Yield (uuid, item) for every row of every listing"""
        for name, content in self.file_contents():
            logger.debug(f"Reading metadata listing {name}")
            for item in parse_metadata_contents(content):
                yield item.uuid, item

    @measure_performance
    def to_snapshot(self) -> MetadataPackageSnapshot:
        return MetadataPackageSnapshot(
            source=self.filename,
            files=dict(self.file_contents()),
            metadata=dict(self.metadata()),
        )
