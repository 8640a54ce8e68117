"""
Pytest configuration and fixtures for the geometry and image tests.
"""

import pytest

from primitives.color import Color
from primitives.matrix import Matrix
from scenes.canvas import Canvas, Pixel


@pytest.fixture
def invertible_matrix():
    """Matrix with determinant 532."""
    return Matrix([
        [-5.0, 2.0, 6.0, -8.0],
        [1.0, -5.0, 1.0, 8.0],
        [7.0, 7.0, -6.0, -7.0],
        [1.0, -3.0, 7.0, 4.0],
    ])


@pytest.fixture
def singular_matrix():
    """Matrix with an all-zero row."""
    return Matrix([
        [-4.0, 2.0, -2.0, -3.0],
        [9.0, 6.0, 2.0, 6.0],
        [0.0, 0.0, 0.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


@pytest.fixture
def diagonal_canvas():
    """5x5 canvas with a white diagonal from the top-left corner."""
    canvas = Canvas(5, 5)
    for step in range(5):
        canvas.set_pixel(Pixel(step, step), Color.rgb(1.0, 1.0, 1.0))
    return canvas
