#!/usr/bin/env python3
'''
 $ handheld-thumbnailer.py -s 128 game.cia game.png

set the environment variable DEBUG to see what is going on.
'''
import sys

from handheld_thumbnailer.thumbnailer import main


if __name__ == '__main__':
    sys.exit(main())
