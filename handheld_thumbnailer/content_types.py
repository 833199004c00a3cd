'''
Content types of the files we can extract an icon from, and the way to
recognize them.

The names are the ones used by the Citra emulator (see the file dist/citra.xml
of its repository) and by shared-mime-info; the first might not be defined on
the user system, so it's better to guess them here than to rely on the desktop.
'''
import logging
import os

from . import n3ds, nds


logger = logging.getLogger(__name__)

SMDH = 'application/x-ctr-smdh'
N3DSX = 'application/x-ctr-3dsx'
N3DS_EXECUTABLE = 'application/x-nintendo-3ds-executable'
CIA = 'application/x-ctr-cia'
CXI = 'application/x-ctr-cxi'
CCI = 'application/x-ctr-cci'
N3DS_ROM = 'application/x-nintendo-3ds-rom'
NDS_ROM = 'application/x-nintendo-ds-rom'
UNKNOWN = 'application/octet-stream'

# list of tuples of the form (offset, bytestring, content type)
signatures = [
    (0, b'SMDH', SMDH),
    (0, b'3DSX', N3DSX),
    (0x100, b'NCSD', CCI),
    (0x100, b'NCCH', CXI),
    # start of the Nintendo logo in the header of a DS rom
    (0xC0, b'\x24\xff\xae\x51\x69\x9a\xa2\x21', NDS_ROM),
]

# the CIA has no signature at all
extensions = {
    '.smdh': SMDH,
    '.icn': SMDH,
    '.3dsx': N3DSX,
    '.cia': CIA,
    '.cxi': CXI,
    '.cci': CCI,
    '.3ds': N3DS_ROM,
    '.nds': NDS_ROM,
}

RESOLVERS = {
    SMDH: n3ds.from_smdh,
    N3DSX: n3ds.from_n3dsx,
    N3DS_EXECUTABLE: n3ds.from_n3dsx,
    CIA: n3ds.from_cia,
    CXI: n3ds.from_cxi,
    CCI: n3ds.from_cci,
    N3DS_ROM: n3ds.from_cci,
    NDS_ROM: nds.from_nds,
}

# enough to check all the signatures
SNIFF_SIZE = max(offset + len(signature) for offset, signature, _ in signatures)


def guess_from_data(data):
    for offset, signature, content_type in signatures:
        if data[offset:offset + len(signature)] == signature:
            return content_type

    return None


def guess_from_extension(path):
    _, ext = os.path.splitext(str(path))
    return extensions.get(ext.lower())


def guess_content_type(path, data=None):
    '''Guess the content type looking at the signatures first and then at the extension.

    If data is not given the first bytes of the file are read.'''
    if data is None:
        with open(path, 'rb') as f:
            data = f.read(SNIFF_SIZE)

    content_type = guess_from_data(data) or guess_from_extension(path) or UNKNOWN
    logger.debug('content type of \'%s\' is %s' % (path, content_type))

    return content_type
