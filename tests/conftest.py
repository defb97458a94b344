"""
Shared fixtures: ZIP packages built on the fly.
"""
import zipfile

import pytest


CFDI_UUID = '11111111-2222-3333-4444-000000000001'

CFDI_CONTENT = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<cfdi:Comprobante xmlns:cfdi="http://www.sat.gob.mx/cfd/4"'
    ' xmlns:tfd="http://www.sat.gob.mx/TimbreFiscalDigital"'
    ' xsi:schemaLocation="http://www.sat.gob.mx/TimbreFiscalDigital'
    ' http://www.sat.gob.mx/sitio_internet/cfd/TimbreFiscalDigital/TimbreFiscalDigitalv11.xsd"'
    ' Version="4.0" Total="1160.00">\n'
    '  <cfdi:Complemento>\n'
    '    <tfd:TimbreFiscalDigital Version="1.1"\n'
    '      UUID="11111111-2222-3333-4444-000000000001"\n'
    '      FechaTimbrado="2024-01-15T10:00:00"/>\n'
    '  </cfdi:Complemento>\n'
    '</cfdi:Comprobante>\n'
).encode('utf-8')

NOT_A_CFDI_CONTENT = b'<?xml version="1.0"?><root>not a cfdi</root>'

# name -> content, in the order they are written; None means directory
CFDI_PACKAGE_ENTRIES = [
    ('__MACOSX/', None),
    ('__MACOSX/._aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee.xml', b'mac resource fork'),
    ('aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee.xml', CFDI_CONTENT),
    ('aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee.xml.xml', CFDI_CONTENT),
    ('00000000-0000-0000-0000-000000000000.xml', NOT_A_CFDI_CONTENT),
    ('empty.xml', b''),
    ('empty-file', b''),
    ('other.txt', b'other content'),
    ('UPPER.XML', CFDI_CONTENT),
]

METADATA_CONTENT = (
    'Uuid~RfcEmisor~NombreEmisor~RfcReceptor~NombreReceptor~RfcPac~FechaEmision'
    '~FechaCertificacionSat~Monto~EfectoComprobante~Estatus~FechaCancelacion\r\n'
    'E7215E3B-2DC5-4A40-AB10-C902FF9258DF~AAA010101AAA~Emisor Uno~XAXX010101000'
    '~Publico en\ngeneral~SAT970701NN3~2024-01-15 10:00:00~2024-01-15 10:01:00'
    '~1160.00~I~1~\r\n'
    'C3E1D7B5-9F8A-4C2E-B7D6-0A1B2C3D4E5F~AAA010101AAA~Emisor Uno~XAXX010101000'
    '~Cliente Dos~SAT970701NN3~2024-01-16 11:00:00~2024-01-16 11:01:00'
    '~500.00~E~0~2024-02-01 09:00:00\r\n'
    'not-a-uuid~AAA010101AAA\r\n'
    '\r\n'
).encode('utf-8')


def build_zip(path, entries):
    with zipfile.ZipFile(path, 'w', zipfile.ZIP_DEFLATED) as archive:
        for name, content in entries:
            if content is None:
                archive.writestr(zipfile.ZipInfo(name), b'')
            else:
                archive.writestr(name, content)
    return path


@pytest.fixture
def cfdi_zip_path(tmp_path):
    """Path of a CFDI package mixing valid and invalid entries"""
    return str(build_zip(tmp_path / 'cfdi.zip', CFDI_PACKAGE_ENTRIES))


@pytest.fixture
def cfdi_zip_contents(cfdi_zip_path):
    with open(cfdi_zip_path, 'rb') as f:
        return f.read()


@pytest.fixture
def metadata_zip_path(tmp_path):
    """Path of a metadata package with one listing"""
    entries = [
        ('__MACOSX/', None),
        ('__MACOSX/._45C5C344-DA01-497A-9271-5AA3852EE6AE_01.txt', b'resource fork'),
        ('45C5C344-DA01-497A-9271-5AA3852EE6AE_01.txt', METADATA_CONTENT),
        ('readme.xml', b'<xml/>'),
    ]
    return str(build_zip(tmp_path / 'metadata.zip', entries))
