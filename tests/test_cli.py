"""Tests for image I/O and the command-line entry point."""

import numpy as np
import pytest
from main import run_cli
from utils.image_io import load_image, save_image
from utils.test_images import generate_noise


def test_png_round_trip(tmp_path):
    image = generate_noise(12, 9, seed=2)
    path = tmp_path / "noise.png"
    save_image(image, str(path))
    loaded = load_image(str(path))
    assert np.array_equal(loaded.array, image.array)


def test_load_missing_file(tmp_path):
    with pytest.raises(ValueError):
        load_image(str(tmp_path / "missing.png"))


def test_cli_filters_file(tmp_path):
    src = tmp_path / "in.png"
    dst = tmp_path / "out.png"
    save_image(generate_noise(32, 24, seed=3), str(src))

    assert run_cli([str(src), "-o", str(dst), "--strategy", "block"]) == 0
    output = load_image(str(dst))
    assert (output.width, output.height) == (32, 24)
    assert np.array_equal(output.array[..., 0], output.array[..., 1])


def test_cli_synthetic_input(tmp_path):
    dst = tmp_path / "out.png"
    assert run_cli(["--synthetic", "gradient", "-o", str(dst)]) == 0
    assert dst.exists()


def test_cli_benchmark(capsys):
    assert run_cli(["--synthetic", "corner_spike", "--benchmark", "--repeat", "1"]) == 0
    out = capsys.readouterr().out
    assert "histogram" in out


def test_cli_reports_errors(tmp_path):
    assert run_cli([str(tmp_path / "missing.png")]) == 1


def test_cli_rejects_tiny_image_for_block(tmp_path):
    src = tmp_path / "tiny.png"
    save_image(generate_noise(4, 4), str(src))
    assert run_cli([str(src), "-o", str(tmp_path / "out.png"), "--strategy", "block"]) == 1
