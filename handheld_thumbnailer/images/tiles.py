'''
# Tiled icons

The large icon of the SMDH is a 48x48 pixels image divided in 8x8 tiles: the tiles
are stored left to right, top to bottom, but the pixels inside each tile follow the
Morton order (the bits of the x and y coordinates are interleaved).

The table mapping the position of a sample inside a tile to its coordinates is
taken from <https://github.com/GEMISIS/SMDH-Creator/blob/master/SMDH-Creator/SMDH.cs>.

The icon in the banner of a Nintendo DS rom is simpler: 32x32 pixels, 8x8 tiles,
pixels in raster order inside each tile and 4 bits for each of them, an index
into a palette of 16 colors.
'''
import logging
import struct

from PIL import Image

from .rgb565 import rgb565_to_rgb888
from ..exceptions import IOFailureException


logger = logging.getLogger(__name__)

ICON_SIZE = 48
TILE_SIZE = 8
# two bytes for each sample
ICON_DATA_SIZE = ICON_SIZE * ICON_SIZE * 2

TILE_ORDER = (
    0, 1, 8, 9, 2, 3, 10, 11, 16, 17, 24, 25, 18, 19, 26, 27,
    4, 5, 12, 13, 6, 7, 14, 15, 20, 21, 28, 29, 22, 23, 30, 31,
    32, 33, 40, 41, 34, 35, 42, 43, 48, 49, 56, 57, 50, 51, 58, 59,
    36, 37, 44, 45, 38, 39, 46, 47, 52, 53, 60, 61, 54, 55, 62, 63,
)


def tile_coordinates(k):
    '''Coordinates inside the tile of the k-th sample'''
    return TILE_ORDER[k] & 0x7, TILE_ORDER[k] >> 3


def iter_pixel_coordinates():
    '''Yield the image coordinates in the same order the samples are stored'''
    tiles = ICON_SIZE // TILE_SIZE
    for tile_y in range(tiles):
        for tile_x in range(tiles):
            for k in range(len(TILE_ORDER)):
                x, y = tile_coordinates(k)
                yield x + tile_x * TILE_SIZE, y + tile_y * TILE_SIZE


def icon_from_bytes(data: bytes) -> Image.Image:
    '''Decode the raw bytes of a large icon into a RGBA image'''
    if len(data) != ICON_DATA_SIZE:
        raise IOFailureException('icon data must be %d bytes, got %d' % (ICON_DATA_SIZE, len(data)))

    samples = (_[0] for _ in struct.iter_unpack('<H', data))

    pixels = [(0, 0, 0, 0)] * (ICON_SIZE * ICON_SIZE)
    for (x, y), color in zip(iter_pixel_coordinates(), samples):
        pixels[y * ICON_SIZE + x] = rgb565_to_rgb888(color) + (0xff,)

    image = Image.new('RGBA', (ICON_SIZE, ICON_SIZE))
    image.putdata(pixels)

    logger.debug('decoded %dx%d icon' % image.size)

    return image


BANNER_ICON_SIZE = 32
# half a byte for each pixel
BANNER_ICON_DATA_SIZE = BANNER_ICON_SIZE * BANNER_ICON_SIZE // 2


def iter_linear_tile_coordinates(size):
    '''Yield the image coordinates of tiles stored left to right, top to bottom,
    with the pixels of each tile in raster order'''
    tiles = size // TILE_SIZE
    for tile_y in range(tiles):
        for tile_x in range(tiles):
            for y in range(TILE_SIZE):
                for x in range(TILE_SIZE):
                    yield x + tile_x * TILE_SIZE, y + tile_y * TILE_SIZE


def iter_nibbles(data):
    '''The low nibble is the pixel on the left'''
    for byte in data:
        yield byte & 0xf
        yield byte >> 4


def paletted_icon_from_bytes(data: bytes, palette) -> Image.Image:
    '''Decode a 32x32 icon with 4 bits per pixel; palette is a list of
    16 RGBA colors.'''
    if len(data) != BANNER_ICON_DATA_SIZE:
        raise IOFailureException('icon data must be %d bytes, got %d' % (BANNER_ICON_DATA_SIZE, len(data)))

    pixels = [(0, 0, 0, 0)] * (BANNER_ICON_SIZE * BANNER_ICON_SIZE)
    for (x, y), index in zip(iter_linear_tile_coordinates(BANNER_ICON_SIZE), iter_nibbles(data)):
        pixels[y * BANNER_ICON_SIZE + x] = palette[index]

    image = Image.new('RGBA', (BANNER_ICON_SIZE, BANNER_ICON_SIZE))
    image.putdata(pixels)

    logger.debug('decoded %dx%d paletted icon' % image.size)

    return image
