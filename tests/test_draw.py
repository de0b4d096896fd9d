"""Tests for image decoding and resizing onto the sticker canvas."""

import pytest
import skia

from nonebot_plugin_kakao_stickers.draw import (
    ImageDecodeError,
    make_sticker_image,
    read_bytes_to_skia_image,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.mark.parametrize(("width", "height"), [(1000, 400), (200, 200), (30, 700)])
def test_output_has_fixed_size(png_factory, width: int, height: int):
    out = make_sticker_image(png_factory(width, height), 512)

    image = read_bytes_to_skia_image(out)
    assert (image.width(), image.height()) == (512, 512)


def test_output_is_png(png_factory):
    out = make_sticker_image(png_factory(64, 64, skia.ColorBLUE), 512)
    assert out.startswith(PNG_SIGNATURE)


def test_custom_size(png_factory):
    image = read_bytes_to_skia_image(make_sticker_image(png_factory(10, 20), 128))
    assert (image.width(), image.height()) == (128, 128)


@pytest.mark.parametrize("data", [b"", b"definitely not an image"])
def test_undecodable_bytes_raise(data: bytes):
    with pytest.raises(ImageDecodeError):
        make_sticker_image(data, 512)


def draw_png(width: int, height: int, rects: list[tuple[skia.Rect, int]]) -> bytes:
    """PNG with a transparent background and the given filled rects."""

    surface = skia.Surface(width, height)
    with surface as canvas:
        canvas.clear(skia.ColorTRANSPARENT)
        for rect, color in rects:
            canvas.drawRect(rect, skia.Paint(Color=color))
    return surface.makeImageSnapshot().encodeToData(skia.kPNG, 100).bytes()


def read_rgba(data: bytes):
    return read_bytes_to_skia_image(data).toarray(
        colorType=skia.kRGBA_8888_ColorType,
        alphaType=skia.kUnpremul_AlphaType,
    )


def test_source_is_stretched_over_whole_canvas():
    # left half red, right half blue, 2:1 aspect
    source = draw_png(
        200,
        100,
        [
            (skia.Rect.MakeXYWH(0, 0, 100, 100), skia.ColorRED),
            (skia.Rect.MakeXYWH(100, 0, 100, 100), skia.ColorBLUE),
        ],
    )

    pixels = read_rgba(make_sticker_image(source, 512))

    for x, y in [(2, 2), (2, 509), (200, 256)]:
        assert tuple(pixels[y, x]) == (255, 0, 0, 255)
    for x, y in [(509, 2), (509, 509), (312, 256)]:
        assert tuple(pixels[y, x]) == (0, 0, 255, 255)


def test_transparent_pixels_stay_transparent():
    # opaque red in the top-left quarter only
    source = draw_png(100, 100, [(skia.Rect.MakeXYWH(0, 0, 50, 50), skia.ColorRED)])

    pixels = read_rgba(make_sticker_image(source, 512))

    assert tuple(pixels[100, 100]) == (255, 0, 0, 255)
    for x, y in [(400, 400), (400, 100), (100, 400), (511, 511)]:
        assert pixels[y, x][3] == 0
