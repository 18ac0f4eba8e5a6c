"""A camera that replays a directory of images at a fixed frame rate."""

from __future__ import annotations

import itertools
import time
from pathlib import Path

import numpy as np
from PIL import Image

from .data_queue import DataQueue, QueueClosed


def image_paths(path: str | Path) -> list[str]:
    """All entries of a directory, sorted by path."""
    return sorted(str(entry) for entry in Path(path).iterdir())


def load_image(path: str | Path) -> np.ndarray:
    """Read an image file as an 8-bit BGR array."""
    with Image.open(path) as img:
        rgb = np.asarray(img.convert("RGB"))
    return np.ascontiguousarray(rgb[..., ::-1])


def run_virtual_camera(path: str | Path, fps: int, outqueue: DataQueue) -> None:
    """Loop over the images in path forever, one per frame, until outqueue closes."""
    try:
        if fps <= 0:
            raise ValueError("fps must be positive")
        delay_ms = 1000 // fps
        paths = image_paths(path)
        if not paths:
            raise ValueError(f"no images in {path}")
        for frame_path in itertools.cycle(paths):
            start = time.monotonic()
            outqueue.put(load_image(frame_path), max_len=1)
            elapsed_ms = int((time.monotonic() - start) * 1000)
            time.sleep(max(0, delay_ms - elapsed_ms) / 1000)
    except QueueClosed:
        pass
    finally:
        outqueue.shut_down()