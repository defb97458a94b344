"""
SAT Package Reader

Read-only access to the ZIP packages delivered by the SAT bulk download service.
"""

__version__ = '1.0.0'
__author__ = 'Your Name'
__license__ = 'MIT'

from sat_package_reader.core import (
    ArchiveOpenError,
    TemporaryFileCreationError,
    PackageReaderError,
    CfdiPackageReader,
    MetadataPackageReader,
    CfdiPackageSnapshot,
    obtain_uuid_from_xml_cfdi
)

__all__ = [
    'ArchiveOpenError',
    'TemporaryFileCreationError',
    'PackageReaderError',
    'CfdiPackageReader',
    'MetadataPackageReader',
    'CfdiPackageSnapshot',
    'obtain_uuid_from_xml_cfdi',
]
