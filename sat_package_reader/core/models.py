"""
Data models for package snapshots and metadata listings.
Using Pydantic for validation and serialization.
"""
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator

from sat_package_reader.core.extractors import is_valid_uuid


class MetadataItem(BaseModel):
    """Single row of a SAT metadata listing"""
    uuid: str
    values: Dict[str, str] = Field(default_factory=dict)

    @field_validator('uuid')
    @classmethod
    def validate_uuid(cls, v):
        v = v.strip().lower()
        if not is_valid_uuid(v):
            raise ValueError(f'Invalid UUID: {v}')
        return v

    def get(self, key: str, default: str = '') -> str:
        """Field value by header name (lower camel case, e.g. rfcEmisor)"""
        return self.values.get(key, default)


class PackageSnapshot(BaseModel):
    """Serializable view of an opened package"""
    # contents are arbitrary bytes, JSON carries them as base64
    model_config = ConfigDict(ser_json_bytes='base64', val_json_bytes='base64')

    source: str
    files: Dict[str, bytes] = Field(default_factory=dict)

    @property
    def file_count(self) -> int:
        return len(self.files)


class CfdiPackageSnapshot(PackageSnapshot):
    """Snapshot of a CFDI package: files by name and documents by UUID"""
    documents: Dict[str, bytes] = Field(default_factory=dict)

    @property
    def unidentified_files(self) -> int:
        # duplicated UUIDs also count here, they collapse into one document
        return len(self.files) - len(self.documents)


class MetadataPackageSnapshot(PackageSnapshot):
    """Snapshot of a metadata package: listing files and items by UUID"""
    metadata: Dict[str, MetadataItem] = Field(default_factory=dict)
