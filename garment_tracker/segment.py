"""Binary threshold segmentation of colour frames."""

from __future__ import annotations

import numpy as np

from .data_queue import DataQueue, QueueClosed

THRESHOLD = 100
MAX_VALUE = 255


def _gray(image: np.ndarray) -> np.ndarray:
    arr = np.asarray(image)
    if arr.ndim == 2:
        return arr.astype(np.uint8)
    blue, green, red = (arr[..., channel].astype(np.float64) for channel in range(3))
    gray = np.rint(0.114 * blue + 0.587 * green + 0.299 * red)
    return np.clip(gray, 0, 255).astype(np.uint8)


def segment(image: np.ndarray) -> np.ndarray:
    """Threshold a BGR frame: pixels brighter than the threshold become white."""
    binary = np.where(_gray(image) > THRESHOLD, MAX_VALUE, 0).astype(np.uint8)
    return np.repeat(binary[..., np.newaxis], 3, axis=2)


def run_segmentation(inqueue: DataQueue, outqueue: DataQueue) -> None:
    """Segment every frame from inqueue into outqueue until either queue closes."""
    try:
        while True:
            outqueue.put(segment(inqueue.get()))
    except QueueClosed:
        pass
    finally:
        inqueue.shut_down()
        outqueue.shut_down()