"""Tests for gamma correction and 8-bit quantization."""

import numpy as np

from spheretracer.renderer.tone_mapping import format_pixels, gamma_quantize


def quantize(r, g, b, samples=1):
    return gamma_quantize(np.array([[r, g, b]]), samples)[0].tolist()


def test_gamma_two():
    assert quantize(0.25, 0.0, 1.0) == [128, 0, 255]


def test_average_over_samples():
    assert quantize(1.0, 4.0, 0.0, samples=4) == [128, 255, 0]


def test_values_above_one_saturate():
    assert quantize(3.0, 1.5, 1.0) == [255, 255, 255]


def test_non_finite_and_negative_values():
    assert quantize(float("nan"), float("inf"), -0.5) == [0, 255, 0]
    assert quantize(float("-inf"), 0.0, 0.0) == [0, 0, 0]


def test_format_pixels():
    assert format_pixels(np.array([[1, 2, 3], [255, 0, 9]])) == ["1 2 3", "255 0 9"]


def test_quantize_then_format():
    accumulated = np.array([[0.25, 1.0, 0.0], [2.0, 0.0, 0.5]])
    assert format_pixels(gamma_quantize(accumulated, 1)) == ["128 255 0", "255 0 181"]
    assert format_pixels(gamma_quantize(accumulated, 2)) == ["90 181 0", "255 0 128"]
