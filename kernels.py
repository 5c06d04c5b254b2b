# kernels.py
# Small fixed filter kernels used by the focus measures.

import cv2
import numpy as np

from config import GAUSSIAN_KSIZE, GAUSSIAN_SIGMA


def second_derivative_kernel() -> np.ndarray:
    """Return the 3x1 second-difference kernel [-1, 2, -1]."""
    return np.array([[-1.0], [2.0], [-1.0]], dtype=np.float64)


def gaussian_kernel(ksize: int = GAUSSIAN_KSIZE, sigma: float = GAUSSIAN_SIGMA) -> np.ndarray:
    """Return a ksize x 1 Gaussian smoothing kernel.

    A non-positive sigma lets OpenCV derive it from ksize.
    """
    if ksize <= 0 or ksize % 2 == 0:
        raise ValueError("Gaussian ksize must be a positive odd integer")
    return cv2.getGaussianKernel(ksize, sigma, cv2.CV_64F)
