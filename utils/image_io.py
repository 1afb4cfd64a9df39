"""Image I/O using OpenCV."""

import cv2
import numpy as np

from models.pixel_buffer import PixelBuffer


def load_image(path: str) -> PixelBuffer:
    """Load image as an RGB uint8 buffer."""
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return PixelBuffer.from_array(cv2.cvtColor(img, cv2.COLOR_BGR2RGB))


def save_image(image: PixelBuffer, path: str) -> None:
    """Save RGB buffer; format follows the file extension."""
    if image.channels != 3:
        raise ValueError(f"Expected an RGB image, got {image.channels} channel(s)")
    bgr = cv2.cvtColor(np.ascontiguousarray(image.array), cv2.COLOR_RGB2BGR)
    try:
        ok = cv2.imwrite(str(path), bgr)
    except cv2.error as e:
        raise ValueError(f"Could not save image to {path}: {e}") from e
    if not ok:
        raise ValueError(f"Could not save image to {path}")
