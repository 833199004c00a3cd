import pytest

from handheld_thumbnailer.images.rgb565 import rgb565_to_rgb888, expand_channel


@pytest.mark.parametrize('color,expected', [
    (0x0000, (0x00, 0x00, 0x00)),
    (0xFFFF, (0xff, 0xff, 0xff)),
    (0xF800, (0xff, 0x00, 0x00)),
    (0x07E0, (0x00, 0xff, 0x00)),
    (0x001F, (0x00, 0x00, 0xff)),
    (0x8410, (0x84, 0x82, 0x84)),
    (0x0821, (0x08, 0x04, 0x08)),
])
def test_golden_values(color, expected):
    assert rgb565_to_rgb888(color) == expected


def test_expand_channel():
    assert expand_channel(0b10000, 5) == 0b10000100
    assert expand_channel(0b100000, 6) == 0b10000010
    assert expand_channel(0x1f, 5) == 0xff
    assert expand_channel(0x3f, 6) == 0xff


def test_total_and_deterministic():
    for color in range(0x10000):
        rgb = rgb565_to_rgb888(color)

        assert len(rgb) == 3
        assert all(0 <= _ <= 0xff for _ in rgb)
        assert rgb565_to_rgb888(color) == rgb


def test_channels_are_monotonic():
    reds = [rgb565_to_rgb888(_ << 11)[0] for _ in range(32)]
    greens = [rgb565_to_rgb888(_ << 5)[1] for _ in range(64)]

    assert reds == sorted(set(reds))
    assert greens == sorted(set(greens))
