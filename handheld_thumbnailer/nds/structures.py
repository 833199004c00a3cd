'''
# Nintendo DS structures

 - header: <https://problemkaputt.de/gbatek.htm#dscartridgeheader>
 - icon/title (banner): <https://problemkaputt.de/gbatek.htm#dscartridgeicontitle>
'''
from ..core import Chunk
from .. import fields


class NDSBannerPointer(Chunk):
    '''At offset 0x68 of the header, zero if the rom has no banner'''
    banner_offset = fields.StructField('I')


class NDSBanner(Chunk):
    '''The part of the banner shared by all the versions: the titles follow the palette.'''
    version  = fields.StructField('H')
    crcs     = fields.ArrayField(fields.StructField('H'), n=4)
    reserved = fields.StringField(0x16)
    bitmap   = fields.StringField(0x200)
    palette  = fields.ArrayField(fields.StructField('H'), n=16)
