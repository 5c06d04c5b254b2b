# image_utils.py
# Directory and image loading utilities

import os
from typing import List, Optional

import cv2
import numpy as np


def list_entries(root: str) -> List[str]:
    """Return paths of all entries directly under root, sorted by name.

    Hidden entries are skipped; subdirectories and other non-files are kept so
    the caller can report them. Raises FileNotFoundError or NotADirectoryError
    if root cannot be enumerated.
    """
    if not os.path.exists(root):
        raise FileNotFoundError(f"No such directory: {root}")
    if not os.path.isdir(root):
        raise NotADirectoryError(f"Not a directory: {root}")

    paths = []
    for filename in sorted(os.listdir(root)):
        if filename.startswith("."):
            continue
        paths.append(os.path.join(root, filename))
    return paths


def load_image(path: str) -> Optional[np.ndarray]:
    """Decode path as a BGR colour image, or return None if OpenCV cannot."""
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        return None
    return img
