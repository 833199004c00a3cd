'''
# RGB565

16 bits packed color: 5 bits of red in the most significant bits, 6 bits of green
in the middle and 5 bits of blue in the least significant ones.

Each channel is expanded to 8 bits replicating its most significant bits into
the low ones, so that 0 stays 0 and the maximum value of the channel becomes 0xff.
'''
from functools import lru_cache
from typing import Tuple

from bitstring import Bits


RGB565_FORMAT = 'uint:5, uint:6, uint:5'


def expand_channel(value: int, bits: int) -> int:
    '''Expand a channel of "bits" precision to 8 bits by bit replication'''
    return ((value << (8 - bits)) | (value >> (2 * bits - 8))) & 0xff


@lru_cache(maxsize=None)
def rgb565_to_rgb888(color: int) -> Tuple[int, int, int]:
    red, green, blue = Bits(uint=color, length=16).unpack(RGB565_FORMAT)

    return (
        expand_channel(red, 5),
        expand_channel(green, 6),
        expand_channel(blue, 5),
    )
