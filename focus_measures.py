# focus_measures.py
# Classical focus measures. Higher score means sharper image.

from collections import OrderedDict
from functools import partial

import cv2
import numpy as np

from config import TENG_KSIZE, SOBEL_MAX_KSIZE
from kernels import gaussian_kernel, second_derivative_kernel


class UndefinedFocusMeasure(ValueError):
    """Raised when a focus measure has no defined value for an image."""


def _first_plane(img: np.ndarray) -> np.ndarray:
    """
    Return the first channel of an image as a contiguous float64 plane.

    Every filter used here works per channel and each score is read from the
    first channel, so multi-channel images are scored on plane 0 (blue for BGR).
    """
    if img is None or img.size == 0:
        raise ValueError("image must be a non-empty array")
    if img.ndim == 2:
        plane = img
    elif img.ndim == 3:
        plane = img[:, :, 0]
    else:
        raise ValueError(f"image must be 2D or 3D, got {img.ndim} dimensions")
    return np.ascontiguousarray(plane, dtype=np.float64)


def _mean_std(values: np.ndarray):
    mu, sigma = cv2.meanStdDev(values)
    return float(mu[0, 0]), float(sigma[0, 0])


def lapm(img: np.ndarray) -> float:
    """Modified Laplacian: mean of |Lx| + |Ly| with Gaussian cross-smoothing."""
    src = _first_plane(img)
    m = second_derivative_kernel()
    g = gaussian_kernel()

    lx = cv2.sepFilter2D(src, cv2.CV_64F, m, g)
    ly = cv2.sepFilter2D(src, cv2.CV_64F, g, m)

    return float(np.mean(np.abs(lx) + np.abs(ly)))


def lapv(img: np.ndarray) -> float:
    """Variance of the Laplacian response."""
    src = _first_plane(img)
    lap = cv2.Laplacian(src, cv2.CV_64F)
    _, sigma = _mean_std(lap)
    return sigma * sigma


def teng(img: np.ndarray, ksize: int = TENG_KSIZE) -> float:
    """Tenengrad: mean squared Sobel gradient magnitude."""
    if ksize <= 0 or ksize % 2 == 0 or ksize > SOBEL_MAX_KSIZE:
        raise ValueError(f"Sobel ksize must be an odd integer in [1, {SOBEL_MAX_KSIZE}]")
    src = _first_plane(img)
    gx = cv2.Sobel(src, cv2.CV_64F, 1, 0, ksize=ksize)
    gy = cv2.Sobel(src, cv2.CV_64F, 0, 1, ksize=ksize)
    return float(np.mean(gx * gx + gy * gy))


def glvn(img: np.ndarray) -> float:
    """
    Normalized gray-level variance: sigma^2 / mu.

    Raises UndefinedFocusMeasure when the mean is zero (pure black image).
    """
    src = _first_plane(img)
    mu, sigma = _mean_std(src)
    if mu == 0.0:
        raise UndefinedFocusMeasure("zero mean brightness")
    return (sigma * sigma) / mu


def configure_measures(ksize: int = TENG_KSIZE) -> "OrderedDict":
    """Return the ordered name -> callable table with parameters bound."""
    return OrderedDict([
        ("lapm", lapm),
        ("lapv", lapv),
        ("teng", partial(teng, ksize=ksize)),
        ("glvn", glvn),
    ])


MEASURES = configure_measures()
