import dataclasses

import pytest

from plainppm.codec import Image, InvalidImage


def test_samples_are_frozen_into_a_tuple():
    image = Image("P3", 255, 2, 1, [1, 2])
    assert image.samples == (1, 2)


def test_image_is_immutable():
    image = Image("P3", 255, 1, 1, (0,))
    with pytest.raises(dataclasses.FrozenInstanceError):
        image.width = 5


def test_sample_count_includes_channels():
    assert Image("P3", 255, 4, 3, ()).sample_count == 12
    assert Image("P3", 255, 4, 3, (), channels=3).sample_count == 36


def test_rows():
    image = Image("P3", 255, 2, 3, (1, 2, 3, 4, 5, 6))
    assert list(image.rows()) == [(1, 2), (3, 4), (5, 6)]
    assert image.row(1) == (3, 4)
    with pytest.raises(IndexError):
        image.row(3)


def test_from_rows():
    image = Image.from_rows([[1, 2, 3], [4, 5, 6]], max_value=9)
    assert (image.width, image.height, image.max_value) == (3, 2, 9)
    assert image.samples == (1, 2, 3, 4, 5, 6)


def test_from_rows_with_channels():
    image = Image.from_rows([[1, 2, 3, 4, 5, 6]], channels=3)
    assert (image.width, image.height) == (2, 1)


@pytest.mark.parametrize("channels", [0, 2, True])
def test_from_rows_rejects_unsupported_channels(channels):
    with pytest.raises(InvalidImage):
        Image.from_rows([[1]], channels=channels)


@pytest.mark.parametrize("rows", [[], [[]], [[1, 2], [3]]])
def test_from_rows_rejects_bad_shapes(rows):
    with pytest.raises(InvalidImage):
        Image.from_rows(rows)


def test_in_range():
    assert Image("P3", 3, 2, 1, (0, 3)).in_range()
    assert not Image("P3", 3, 2, 1, (0, 4)).in_range()
    assert not Image("P3", 3, 2, 1, (-1, 0)).in_range()


def test_validate_accepts_valid_image():
    Image("P3", 255, 2, 2, (1, 2, 3, 4)).validate()


@pytest.mark.parametrize(
    "image",
    [
        Image("P3", 255, 2, 1, (1.5, 2)),
        Image("P3", 255, 1, 1, (False,)),
        Image("P3", 255, True, 1, (1,)),
        Image("P3", 255, 1, 1.0, (1,)),
    ],
)
def test_validate_requires_integers(image):
    with pytest.raises(InvalidImage):
        image.validate()
