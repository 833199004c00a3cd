'''
This module contains the constant values used by the Nintendo 3DS formats.

Note: use Enum for value that cannot ORed together, Flag for the others.
'''
from enum import Enum, IntFlag


class CIAMetaSize(Enum):
    '''The meta section of a CIA can only have one of these sizes'''
    NONE     = 0
    CVER_USA = 0x8
    DUMMY    = 0x200
    PRESENT  = 0x3AC0


class NCCHFlag(IntFlag):
    '''Bitmask stored in the last byte of the NCCH flags'''
    FIXED_CRYPTO_KEY = 1 << 0
    NO_MOUNT_ROMFS   = 1 << 1
    NO_CRYPTO        = 1 << 2
    NEW_KEY_Y_GENERATOR = 1 << 5
