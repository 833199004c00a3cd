'''
# Nintendo 3DS structures

Headers of the formats that can contain an SMDH, each one described
from the first field that we need to the last one.

 - SMDH: <https://www.3dbrew.org/wiki/SMDH>
 - 3DSX: <https://www.3dbrew.org/wiki/3DSX_Format>
 - CIA: <https://www.3dbrew.org/wiki/CIA>
 - CCI (specialization of NCSD): <https://www.3dbrew.org/wiki/NCSD>
 - CXI (specialization of NCCH): <https://www.3dbrew.org/wiki/NCCH>
 - ExeFS (internal to CXI): <https://www.3dbrew.org/wiki/ExeFS>

GBATEK covers the same ground at <https://problemkaputt.de/gbatek.htm#3dsfilesvideoiconssmdh>.
'''
from ..core import Chunk
from .. import fields
from ..exceptions import InvalidFieldException
from .enum import CIAMetaSize, NCCHFlag


class SMDHHeader(Chunk):
    pretty_name = 'SMDH'

    magic   = fields.StringField(4, default=b'SMDH', is_magic=True)
    version = fields.StructField('H')
    reserved = fields.StringField(2)


class N3DSXHeader(Chunk):
    '''Only the first fields are needed, the extended header (if any)
    starts at offset 0x20.'''
    pretty_name = '3DSX'

    magic       = fields.StringField(4, default=b'3DSX', is_magic=True)
    header_size = fields.StructField('H')


class N3DSXExtendedHeader(Chunk):
    smdh_offset  = fields.StructField('I')
    smdh_size    = fields.StructField('I')


class CIAHeader(Chunk):
    '''The sizes of the sections of a CIA, from offset 0x08.

    The sections follow the header in this order, each one aligned to 64 bytes:
    certificate chain, ticket, TMD, content and meta.'''
    certificate_chain_size = fields.StructField('I')
    ticket_size            = fields.StructField('I')
    tmd_size               = fields.StructField('I')
    meta_size              = fields.StructField('I', enum=CIAMetaSize, default=CIAMetaSize.NONE)
    content_size           = fields.StructField('Q')


class NCSDHeader(Chunk):
    '''The part after the signature, up to the partitions' filesystem types'''
    pretty_name = 'NCSD'

    magic      = fields.StringField(4, default=b'NCSD', is_magic=True)
    image_size = fields.MediaUnitField()
    media_id   = fields.StructField('Q')


class CCIPartition(Chunk):
    partition_offset = fields.MediaUnitField()
    partition_size   = fields.MediaUnitField()


class NCCHFlags(Chunk):
    reserved          = fields.StringField(3)
    crypto_method     = fields.StructField('B')
    platform          = fields.StructField('B')
    content_type      = fields.StructField('B')
    content_unit_size = fields.StructField('B')
    bitmask           = fields.StructField('B')

    @property
    def is_no_crypto(self):
        return bool(NCCHFlag(self.bitmask.value) & NCCHFlag.NO_CRYPTO)


class NCCHHeader(Chunk):
    '''The header after the signature, from the magic to the flags.'''
    pretty_name = 'NCCH'

    magic             = fields.StringField(4, default=b'NCCH', is_magic=True)
    content_size      = fields.MediaUnitField()
    partition_id      = fields.StructField('Q')
    maker_code        = fields.StringField(2)
    version           = fields.StructField('H')
    seed_check        = fields.StructField('I')
    program_id        = fields.StructField('Q')
    reserved0         = fields.StringField(0x10)
    logo_hash         = fields.StringField(0x20)
    product_code      = fields.StringField(0x10)
    exheader_hash     = fields.StringField(0x20)
    exheader_size     = fields.StructField('I')
    reserved1         = fields.StringField(4)
    flags             = NCCHFlags()


class NCCHRegion(Chunk):
    '''Position of one of the regions of the NCCH (plain, logo, ExeFS, RomFS),
    relative to the start of the NCCH.'''
    region_offset = fields.MediaUnitField()
    region_size   = fields.MediaUnitField()


class ExeFSFileHeader(Chunk):
    '''A slot in the ExeFS header: if not used it's filled with zeroes.'''
    file_name   = fields.StringField(8)
    file_offset = fields.StructField('I')
    file_size   = fields.StructField('I')

    def is_empty(self):
        return not any(self.raw)

    def get_name(self):
        try:
            return self.file_name.value.decode('utf-8').rstrip('\x00')
        except UnicodeDecodeError:
            raise InvalidFieldException('file_name', self.file_name.value)
