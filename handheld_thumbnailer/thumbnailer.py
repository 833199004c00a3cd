'''
Generate the thumbnail of a file containing a Nintendo DS or 3DS icon.

It's meant to be called by the desktop via a .thumbnailer file like

    [Thumbnailer Entry]
    TryExec=handheld-thumbnailer.py
    Exec=handheld-thumbnailer.py -s %s %i %o
    MimeType=application/x-ctr-smdh;application/x-ctr-3dsx;application/x-ctr-cia;application/x-nintendo-ds-rom;
'''
import argparse
import logging
import os
import sys

from PIL import Image

from . import __version__
from .content_types import RESOLVERS, guess_content_type
from .exceptions import ThumbnailerException, UnsupportedFeatureException
from .streams import Stream


logger = logging.getLogger(__name__)

PROGRAM_NAME = 'handheld-thumbnailer'


def extract_icon(path, content_type=None) -> Image.Image:
    content_type = content_type or guess_content_type(path)

    resolver = RESOLVERS.get(content_type)
    if resolver is None:
        raise UnsupportedFeatureException('content type', content_type)

    with Stream(path) as stream:
        return resolver(stream)


def scale_icon(image: Image.Image, size=None) -> Image.Image:
    '''Bilinear scaling to a square of side size, None leaves the image untouched'''
    if size is None:
        return image

    return image.resize((size, size), Image.BILINEAR)


def generate_thumbnail(input_path, output_path, size=None, content_type=None):
    image = scale_icon(extract_icon(input_path, content_type=content_type), size)
    image.save(output_path, 'png')
    logger.debug('saved %dx%d thumbnail to \'%s\'' % (image.width, image.height, output_path))


def positive_int(value):
    size = int(value)
    if size <= 0:
        raise argparse.ArgumentTypeError('size must be a positive integer, got %d' % size)

    return size


def get_parser():
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description='Extract the icon of a Nintendo 3DS file (SMDH, 3DSX, CIA, CCI, CXI) as a PNG thumbnail')
    parser.add_argument('--version', action='version', version='%s v%s' % (PROGRAM_NAME, __version__))
    parser.add_argument('-s', dest='size', type=positive_int, default=None,
                        help='side of the thumbnail in pixels (the icon is 48x48)')
    parser.add_argument('input', help='file to extract the icon from')
    parser.add_argument('output', help='path of the PNG to write')

    return parser


def main(argv=None):
    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)

    args = get_parser().parse_args(argv)

    try:
        generate_thumbnail(args.input, args.output, size=args.size)
    except (ThumbnailerException, OSError) as e:
        logger.error('%s: %s' % (args.input, e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
