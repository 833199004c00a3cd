'''
# Nintendo DS icons

The header of a DS rom points to the banner, where a 32x32 icon with 16 colors
is stored together with the title of the game in several languages.

The colors of the palette are BGR555 and the first one is the transparent color.
'''
import logging

from PIL import Image

from ..streams import Stream
from ..images.bgr555 import bgr555_to_rgb888
from ..images.tiles import paletted_icon_from_bytes
from ..exceptions import ResourceNotFoundException
from .structures import NDSBannerPointer, NDSBanner


logger = logging.getLogger(__name__)

NDS_BANNER_POINTER_OFFSET = 0x68

TRANSPARENT = (0x00, 0x00, 0x00, 0x00)


def get_palette(banner: NDSBanner):
    palette = [bgr555_to_rgb888(_.value) + (0xff,) for _ in banner.palette]
    palette[0] = TRANSPARENT

    return palette


def from_nds(file_data) -> Image.Image:
    stream = file_data if isinstance(file_data, Stream) else Stream(file_data)

    stream.seek(NDS_BANNER_POINTER_OFFSET)
    pointer = NDSBannerPointer(stream)

    banner_offset = pointer.banner_offset.value
    if banner_offset == 0:
        raise ResourceNotFoundException('DS banner')

    stream.seek(banner_offset)
    banner = NDSBanner(stream)

    logger.debug('banner version 0x%x at 0x%x' % (banner.version.value, banner_offset))

    return paletted_icon_from_bytes(banner.bitmap.value, get_palette(banner))
