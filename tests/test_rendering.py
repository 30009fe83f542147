import pytest
from PIL import Image as PILImage

from plainppm.codec import Image, InvalidImage
from plainppm.rendering import image_to_pil, load_raster, pil_to_image, save_raster, scale_sample


def test_scale_sample():
    assert scale_sample(15, 15) == 255
    assert scale_sample(0, 15) == 0
    assert scale_sample(200, 255) == 200
    assert scale_sample(300, 255) == 255
    assert scale_sample(-4, 255) == 0


def test_grayscale_image_to_pil():
    img = image_to_pil(Image("P3", 15, 2, 1, (0, 15)))
    assert img.mode == "L"
    assert img.size == (2, 1)
    assert img.getpixel((0, 0)) == 0
    assert img.getpixel((1, 0)) == 255


def test_rgb_image_to_pil():
    img = image_to_pil(Image("P3", 255, 1, 2, (255, 0, 0, 0, 0, 255), channels=3))
    assert img.mode == "RGB"
    assert img.getpixel((0, 0)) == (255, 0, 0)
    assert img.getpixel((0, 1)) == (0, 0, 255)


def test_pil_to_image_grayscale():
    image = pil_to_image(PILImage.new("L", (3, 2), 128))
    assert (image.width, image.height) == (3, 2)
    assert image.samples == (128,) * 6


def test_pil_to_image_rgb_and_rescale():
    image = pil_to_image(PILImage.new("RGB", (1, 1), (255, 0, 10)), channels=3, max_value=15)
    assert image.max_value == 15
    assert image.samples == (15, 0, 1)


def test_pil_to_image_rejects_unknown_channels():
    with pytest.raises(InvalidImage):
        pil_to_image(PILImage.new("L", (1, 1)), channels=4)


def test_image_to_pil_validates():
    with pytest.raises(InvalidImage):
        image_to_pil(Image("P3", 255, 2, 2, (1,)))


@pytest.mark.parametrize("channels", [1, 3])
def test_png_round_trip(tmp_path, channels):
    samples = tuple(range(0, 240, 10))[: 4 * 2 * channels]
    image = Image("P3", 255, 4, 2, samples, channels)
    path = str(tmp_path / "out.png")
    save_raster(image, path)
    assert load_raster(path, channels) == image
