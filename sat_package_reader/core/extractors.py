"""
UUID extraction from CFDI contents.
A text pattern search, so documents that are not well formed still work.
"""
import logging
import re
from typing import Union


logger = logging.getLogger(__name__)

# TimbreFiscalDigital element with a UUID attribute anywhere in its attribute list
TFD_UUID_PATTERN = re.compile(
    r'TimbreFiscalDigital\b[^>]*?\bUUID\s*=\s*["\']([^"\']*)["\']',
    re.IGNORECASE | re.DOTALL
)
TFD_UUID_BYTES_PATTERN = re.compile(
    TFD_UUID_PATTERN.pattern.encode('ascii'),
    re.IGNORECASE | re.DOTALL
)

UUID_PATTERN = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$',
    re.IGNORECASE | re.ASCII
)


def is_valid_uuid(value: str) -> bool:
    """Check value is 8-4-4-4-12 ASCII hexadecimal groups"""
    return bool(UUID_PATTERN.fullmatch(value))


def obtain_uuid_from_xml_cfdi(source: Union[str, bytes]) -> str:
    """
    Extract the fiscal stamp UUID from CFDI contents.

    Bytes are searched as they are, so documents in any ASCII compatible
    encoding keep their UUID.

    Args:
        source: XML contents as text or bytes

    Returns:
        Lower-case UUID, or empty string when it cannot be found

    Example:
        >>> obtain_uuid_from_xml_cfdi('<tfd:TimbreFiscalDigital UUID="FF833B27-C8AB-4C44-A559-2C197BDD4067"/>')
        'ff833b27-c8ab-4c44-a559-2c197bdd4067'
    """
    if not source:
        return ''

    if isinstance(source, bytes):
        match = TFD_UUID_BYTES_PATTERN.search(source)
    else:
        match = TFD_UUID_PATTERN.search(source)
    if match is None:
        return ''

    uuid = match.group(1)
    if isinstance(uuid, bytes):
        # non ASCII bytes become U+FFFD and fail the shape check
        uuid = uuid.decode('ascii', errors='replace')
    if not is_valid_uuid(uuid):
        logger.debug(f"Discarding malformed UUID: {uuid!r}")
        return ''

    return uuid.lower()
