"""SAT Package Reader - Core Package"""

from sat_package_reader.core.archive import ArchiveReader
from sat_package_reader.core.exceptions import (
    PackageReaderError,
    ArchiveOpenError,
    TemporaryFileCreationError
)
from sat_package_reader.core.extractors import obtain_uuid_from_xml_cfdi
from sat_package_reader.core.models import (
    MetadataItem,
    PackageSnapshot,
    CfdiPackageSnapshot,
    MetadataPackageSnapshot
)
from sat_package_reader.core.readers import (
    PackageReader,
    CfdiPackageReader,
    MetadataPackageReader
)
from sat_package_reader.core.source import ArchiveSource

__all__ = [
    'ArchiveReader',
    'ArchiveSource',
    'PackageReaderError',
    'ArchiveOpenError',
    'TemporaryFileCreationError',
    'obtain_uuid_from_xml_cfdi',
    'MetadataItem',
    'PackageSnapshot',
    'CfdiPackageSnapshot',
    'MetadataPackageSnapshot',
    'PackageReader',
    'CfdiPackageReader',
    'MetadataPackageReader',
]
