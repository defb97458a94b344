"""
Parser for the "~" separated metadata listings delivered by SAT.
"""
import logging
from typing import Generator, List, Union

from pydantic import ValidationError

from sat_package_reader.core.models import MetadataItem


logger = logging.getLogger(__name__)

SEPARATOR = '~'


def _lower_camel(header: str) -> str:
    header = header.strip()
    return header[:1].lower() + header[1:]


def _split_records(text: str) -> List[str]:
    # with CRLF records, a bare LF is part of a field value
    if '\r\n' in text:
        return text.split('\r\n')
    return text.split('\n')


def parse_metadata_contents(contents: Union[str, bytes]) -> Generator[MetadataItem, None, None]:
    """
    Yield metadata items from a listing.

    The first non blank record is the header. Rows shorter than the header
    are padded with empty values; rows without a valid UUID are skipped.

    Args:
        contents: Listing text or UTF-8 bytes

    Yields:
        MetadataItem objects
    """
    if isinstance(contents, bytes):
        contents = contents.decode('utf-8-sig', errors='replace')

    headers = None
    for record in _split_records(contents):
        if not record.strip():
            continue

        values = record.split(SEPARATOR)
        if headers is None:
            headers = [_lower_camel(value) for value in values]
            continue

        values += [''] * (len(headers) - len(values))
        data = dict(zip(headers, values))

        try:
            item = MetadataItem(uuid=data.get('uuid', ''), values=data)
        except ValidationError:
            logger.warning(f"Skipping metadata row without valid UUID: {record[:60]!r}")
            continue

        yield item
