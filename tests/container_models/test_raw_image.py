"""Tests for the RawImage container."""

import numpy as np
import pytest
from pydantic import ValidationError

from rawimage import ImageSource, PixelOutOfRangeError, RawImage
from rawimage.container_models.base import Pair
from rawimage.exceptions import ImageShapeMismatchError


class TestConstruction:
    @pytest.mark.parametrize(
        ("width", "height"),
        [
            pytest.param(1, 1, id="single_pixel"),
            pytest.param(5, 1, id="single_row"),
            pytest.param(1, 5, id="single_column"),
            pytest.param(7, 3, id="rectangular"),
        ],
    )
    def test_pixels_round_trip(self, width: int, height: int):
        # Arrange
        pixels = np.arange(width * height, dtype=np.float32) - 3.5
        # Act
        image = RawImage.from_pixels(width, height, pixels)
        # Assert
        assert np.array_equal(image.get_pixels(), pixels)

    def test_accepts_plain_sequence(self):
        image = RawImage.from_pixels(2, 2, [1, 2, 3, 4])

        assert image.get_pixels().tolist() == [1.0, 2.0, 3.0, 4.0]
        assert image.data.dtype == np.float32

    def test_row_major_layout(self, raw_image: RawImage):
        for y in range(raw_image.height):
            for x in range(raw_image.width):
                assert raw_image.get_pixel(x, y) == 10 * y + x
                assert raw_image.get_pixels()[y * raw_image.width + x] == 10 * y + x

    @pytest.mark.parametrize(
        "n_pixels",
        [
            pytest.param(11, id="too_few"),
            pytest.param(13, id="too_many"),
            pytest.param(0, id="empty"),
        ],
    )
    def test_pixel_count_mismatch_raises_error(self, n_pixels: int):
        with pytest.raises(ImageShapeMismatchError, match="Expected 12 pixels"):
            RawImage.from_pixels(4, 3, np.zeros(n_pixels))

    @pytest.mark.parametrize(
        ("width", "height"),
        [
            pytest.param(0, 3, id="zero_width"),
            pytest.param(3, 0, id="zero_height"),
            pytest.param(-2, -2, id="negative"),
        ],
    )
    def test_non_positive_size_raises_error(self, width: int, height: int):
        with pytest.raises(ValueError, match="Image size should be positive"):
            RawImage.from_pixels(width, height, [1.0, 2.0, 3.0, 4.0])

    def test_source_pixels_are_copied(self, pixels: np.ndarray):
        # Arrange
        image = RawImage.from_pixels(4, 3, pixels)
        # Act
        pixels[0] = 999.0
        # Assert
        assert image.get_pixel(0, 0) == 0.0

    def test_direct_construction_requires_2d_data(self):
        with pytest.raises(ValidationError, match="expected 2 dimension"):
            RawImage(data=np.ones(4))

    def test_blank(self):
        image = RawImage.blank(width=3, height=2, value=-1.0)

        assert image.dimensions == (3, 2)
        assert np.all(image.get_pixels() == -1.0)

    def test_shape_cannot_be_reassigned(self, raw_image: RawImage):
        with pytest.raises(ValidationError, match="frozen"):
            raw_image.data = np.ones((2, 2), dtype=np.float32)  # type: ignore


class TestShapeAccessors:
    @pytest.mark.parametrize(
        ("width", "height"),
        [
            pytest.param(1, 1, id="1x1"),
            pytest.param(4, 3, id="4x3"),
            pytest.param(3, 4, id="3x4"),
            pytest.param(64, 32, id="64x32"),
        ],
    )
    def test_shape_metadata(self, width: int, height: int):
        image = RawImage.blank(width, height)

        assert image.width == width
        assert image.height == height
        assert image.dimensions == Pair(width, height)
        assert image.dimensions.x == width
        assert image.dimensions.y == height
        assert image.pixels_per_image == width * height
        assert image.data.shape == (height, width)

    def test_is_image_source(self, raw_image: RawImage):
        assert isinstance(raw_image, ImageSource)

    def test_shape_metadata_stays_in_sync_after_mutation(self, raw_image: RawImage):
        raw_image.set_all_pix(1.0)
        raw_image.set_pixel(3, 2, 5.0)

        assert raw_image.dimensions == (4, 3)
        assert raw_image.pixels_per_image == raw_image.get_pixels().size


class TestPixelAccess:
    def test_get_pixels_returns_copy(self, raw_image: RawImage):
        # Arrange
        pixels = raw_image.get_pixels()
        # Act
        pixels[:] = -1.0
        # Assert
        assert raw_image.get_pixel(0, 0) == 0.0

    @pytest.mark.parametrize(
        ("x", "y"),
        [
            pytest.param(4, 0, id="x_equals_width"),
            pytest.param(0, 3, id="y_equals_height"),
            pytest.param(-1, 0, id="negative_x"),
            pytest.param(0, -1, id="negative_y"),
        ],
    )
    def test_get_pixel_out_of_range_raises_error(
        self, raw_image: RawImage, x: int, y: int
    ):
        with pytest.raises(PixelOutOfRangeError, match="outside the image of size 4x3"):
            raw_image.get_pixel(x, y)

    @pytest.mark.parametrize(
        ("x", "y", "expected"),
        [
            pytest.param(True, 0, 1.0, id="bool_x"),
            pytest.param(0, True, 10.0, id="bool_y"),
            pytest.param(np.int64(3), np.int64(2), 23.0, id="numpy_int64"),
        ],
    )
    def test_get_pixel_with_integer_like_coordinates(
        self, raw_image: RawImage, x, y, expected: float
    ):
        assert raw_image.get_pixel(x, y) == expected
        assert raw_image.pixel_has_data(x, y)

    def test_check_bounds_returns_plain_ints(self, raw_image: RawImage):
        x, y = raw_image.check_bounds(np.int64(1), True)

        assert (type(x), type(y)) == (int, int)
        assert (x, y) == (1, 1)

    def test_get_pixel_with_float_coordinate_raises_error(self, raw_image: RawImage):
        with pytest.raises(TypeError):
            raw_image.get_pixel(1.0, 0)

    def test_pixel_has_data(self, raw_image: RawImage):
        raw_image.set_pixel(1, 1, np.nan)

        assert not raw_image.pixel_has_data(1, 1)
        assert raw_image.pixel_has_data(0, 0)

    def test_valid_mask_is_read_only(self, raw_image: RawImage):
        raw_image.set_pixel(2, 0, np.nan)
        valid_mask = raw_image.valid_mask

        assert valid_mask.sum() == raw_image.pixels_per_image - 1
        assert not valid_mask[0, 2]
        with pytest.raises(ValueError, match="read-only"):
            valid_mask[0, 0] = False

    def test_compute_bounds_ignores_invalid_pixels(self, raw_image: RawImage):
        raw_image.set_pixel(3, 2, np.nan)

        assert raw_image.compute_bounds() == Pair(0.0, 22.0)

    def test_compute_bounds_without_valid_pixels_raises_error(self):
        image = RawImage.blank(2, 2, value=np.nan)

        with pytest.raises(ValueError, match="no valid pixels"):
            image.compute_bounds()


class TestEquality:
    def test_equal_with_nan(self):
        first = RawImage.from_pixels(2, 1, [np.nan, 1.0])
        second = RawImage.from_pixels(2, 1, [np.nan, 1.0])

        assert first == second

    def test_not_equal_to_other_types(self, raw_image: RawImage):
        assert raw_image.__eq__(raw_image.get_pixels()) is NotImplemented
        assert raw_image != "raw_image"

    def test_same_pixels_different_shape_not_equal(self):
        assert RawImage.blank(2, 3) != RawImage.blank(3, 2)
