import skia


class ImageDecodeError(ValueError):
    pass


def read_bytes_to_skia_image(data: bytes) -> skia.Image:
    image = skia.Image.MakeFromEncoded(skia.Data.MakeWithCopy(data))
    if image is None:
        raise ImageDecodeError(f"Cannot decode image ({len(data)} bytes)")
    return image


def make_canvas_surface(image: skia.Image, size: int) -> skia.Surface:
    """Scale the whole image onto a transparent `size` x `size` canvas."""

    surface = skia.Surface(size, size)
    with surface as canvas:
        canvas.clear(skia.ColorTRANSPARENT)
        # default paint blends with src-over
        canvas.drawImageRect(
            image,
            skia.Rect.MakeWH(size, size),
            skia.SamplingOptions(skia.FilterMode.kLinear),
        )
    return surface


def save_image(surface: skia.Surface) -> bytes:
    return surface.makeImageSnapshot().encodeToData(skia.kPNG, 100).bytes()


def make_sticker_image(data: bytes, size: int) -> bytes:
    return save_image(make_canvas_surface(read_bytes_to_skia_image(data), size))
