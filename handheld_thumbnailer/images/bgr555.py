'''
# BGR555

16 bits packed color used by the Nintendo DS: red in the 5 least significant bits,
then green and blue; the most significant bit is unused.
'''
from functools import lru_cache
from typing import Tuple

from bitstring import Bits

from .rgb565 import expand_channel


BGR555_FORMAT = 'uint:1, uint:5, uint:5, uint:5'


@lru_cache(maxsize=None)
def bgr555_to_rgb888(color: int) -> Tuple[int, int, int]:
    _, blue, green, red = Bits(uint=color, length=16).unpack(BGR555_FORMAT)

    return (
        expand_channel(red, 5),
        expand_channel(green, 5),
        expand_channel(blue, 5),
    )
