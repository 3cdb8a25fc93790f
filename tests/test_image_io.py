from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from dominant_colours.errors import (
    ImageDecodeError,
    ImageFormatError,
    ImageIOError,
    UnrecognisedFormatError,
    UnsupportedFormatError,
)
from dominant_colours.image_io import (
    codec_format,
    extract_samples,
    sample_animated,
    sample_static,
    sampler_kind,
    select_frame_indices,
)


def test_static_image_yields_every_pixel(red_png):
    samples = extract_samples(red_png)
    assert samples.shape == (100, 4)
    assert samples.dtype == np.uint8
    assert {tuple(row) for row in samples.tolist()} == {(255, 0, 0, 255)}


@pytest.mark.parametrize("fixture", ["noise_jpg", "green_tiff", "yellow_gif"])
def test_other_formats_decode(request, fixture):
    samples = extract_samples(request.getfixturevalue(fixture))
    assert samples.shape[0] > 0
    assert samples.shape[1] == 4


def test_animation_contributes_both_colours(animated_squares_gif):
    samples = extract_samples(animated_squares_gif)
    colours = {tuple(row[:3]) for row in samples.tolist()}
    assert colours == {(255, 0, 0), (0, 0, 255)}


def test_sampler_kind_is_case_insensitive():
    assert sampler_kind(Path("a.gif")) == "animated"
    assert sampler_kind(Path("a.GIF")) == "animated"
    assert sampler_kind(Path("a.png")) == "static"


def test_uppercase_gif_extension(animated_upper_gif):
    samples = extract_samples(animated_upper_gif)
    colours = {tuple(row[:3]) for row in samples.tolist()}
    assert colours == {(255, 0, 0), (0, 0, 255)}


class TestSelectFrameIndices:
    def test_short_animation_uses_all_frames(self):
        assert select_frame_indices(7, max_frames=50) == list(range(7))

    def test_long_animation_is_capped_and_spans_whole_range(self):
        picks = select_frame_indices(1000, max_frames=50)
        assert len(picks) == 50
        assert picks[0] == 0
        assert picks[-1] == 999
        assert picks == sorted(set(picks))

    def test_no_frames(self):
        assert select_frame_indices(0) == []


def test_sample_budget_is_respected(tmp_path):
    frames = [Image.new("RGB", (40, 40), c) for c in [(255, 0, 0), (0, 255, 0)] * 3]
    path = tmp_path / "budget.gif"
    frames[0].save(path, save_all=True, append_images=frames[1:], duration=100)

    with Image.open(path) as im:
        samples = sample_animated(im, max_frames=4, max_samples=400)

    assert samples.shape[0] <= 400
    colours = {tuple(row[:3]) for row in samples.tolist()}
    assert colours == {(255, 0, 0), (0, 255, 0)}


class TestHighBitDepth:
    def test_sixteen_bit_png_is_scaled_not_clipped(self, grey16_png):
        with Image.open(grey16_png) as im:
            assert im.mode.startswith("I")
        samples = extract_samples(grey16_png)
        assert {tuple(row) for row in samples.tolist()} == {(128, 128, 128, 255)}

    @pytest.mark.parametrize(
        "arr",
        [
            np.full((4, 4), 32768, dtype=np.int32),
            np.full((4, 4), 0.5, dtype=np.float32),
        ],
    )
    def test_int_and_float_modes(self, arr):
        samples = sample_static(Image.fromarray(arr))
        assert samples.shape == (16, 4)
        assert {tuple(row) for row in samples.tolist()} == {(128, 128, 128, 255)}


def test_exif_orientation_is_applied(rotated_png):
    samples = extract_samples(rotated_png)
    assert [tuple(row[:3]) for row in samples.tolist()] == [(0, 0, 255), (255, 0, 0)]


class TestErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageIOError) as excinfo:
            extract_samples(tmp_path / "doesnotexist.jpg")
        assert "No such file or directory" in str(excinfo.value)

    def test_missing_gif(self, tmp_path):
        with pytest.raises(ImageIOError):
            extract_samples(tmp_path / "doesnotexist.gif")

    def test_unrecognised_extension(self, text_file):
        with pytest.raises(UnrecognisedFormatError) as excinfo:
            extract_samples(text_file)
        assert str(excinfo.value) == (
            "The file extension `.md` was not recognized as an image format"
        )

    def test_unsupported_format(self, pcx_file):
        with pytest.raises(UnsupportedFormatError) as excinfo:
            extract_samples(pcx_file)
        assert str(excinfo.value) == "The image format PCX is not supported"

    def test_malformed_image(self, malformed_png):
        with pytest.raises(ImageDecodeError) as excinfo:
            extract_samples(malformed_png)
        assert str(excinfo.value).startswith("Format error decoding PNG")

    def test_truncated_image(self, tmp_path, red_png):
        data = red_png.read_bytes()
        path = tmp_path / "truncated.png"
        path.write_bytes(data[: len(data) // 2])
        with pytest.raises(ImageFormatError):
            extract_samples(path)

    def test_codec_format_for_known_extensions(self):
        assert codec_format(Path("x.JPG")) == "JPEG"
        assert codec_format(Path("x.tif")) == "TIFF"
