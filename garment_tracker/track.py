"""Detection of bright regions and their tracking across frames."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np
from PIL import Image, ImageDraw, ImageFont
from scipy import ndimage

from .data_queue import DataQueue, QueueClosed
from .track_entity import Rect, TrackEntity

CONTOUR_AREA_MIN = 100
DISTANCE_MAX = 50


def _gray(image: np.ndarray) -> np.ndarray:
    arr = np.asarray(image)
    if arr.ndim == 2:
        return arr
    blue, green, red = (arr[..., channel].astype(np.float64) for channel in range(3))
    return np.rint(0.114 * blue + 0.587 * green + 0.299 * red)


def rect_distance(a: Rect, b: Rect) -> float:
    """Euclidean distance between the centres of two rectangles."""
    ax, ay = a.center()
    bx, by = b.center()
    return math.hypot(bx - ax, by - ay)


def bounding_rect(contour: Iterable[tuple[int, int]]) -> Rect:
    """Tightest rectangle over (x, y) points; its size is max minus min."""
    points = [(int(x), int(y)) for x, y in contour]
    if not points:
        raise ValueError("contour has no points")
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


def _contour_area(pixels: int, edge_pixels: int) -> float:
    # Area of the polygon through the edge pixel centres (Pick's theorem).
    return max(0.0, pixels - edge_pixels / 2 - 1)


def detect_units(image: np.ndarray) -> list[Rect]:
    """Bounding rectangles of large enough regions clear of the left and right borders."""
    arr = np.asarray(image)
    mask = _gray(arr) > 0
    labels, _ = ndimage.label(mask, structure=np.ones((3, 3), dtype=bool))
    columns = arr.shape[1]
    units = []
    for index, region in enumerate(ndimage.find_objects(labels), start=1):
        if region is None:
            continue
        component = labels[region] == index
        edge = component & ~ndimage.binary_erosion(component, border_value=0)
        ys, xs = np.nonzero(edge)
        rect = bounding_rect(zip(xs + region[1].start, ys + region[0].start))
        area = _contour_area(int(component.sum()), len(xs))
        if area >= CONTOUR_AREA_MIN and rect.x > 0 and rect.x + rect.width < columns - 1:
            units.append(rect)
    return units


class Tracker:
    """Keeps identities of detected units by matching nearest rectangles."""

    def __init__(self) -> None:
        self.units: list[TrackEntity] = []
        self._next_id = 0

    def update(self, image: np.ndarray) -> list[TrackEntity]:
        """Match this frame's detections to tracked units and return the tracked units."""
        detected = detect_units(image)
        kept = []
        for unit in self.units:
            if not detected:
                continue
            distances = [rect_distance(unit.bounding_rect, rect) for rect in detected]
            # Ties go to the last candidate.
            best = min(reversed(range(len(distances))), key=distances.__getitem__)
            if distances[best] < DISTANCE_MAX:
                unit.bounding_rect = detected.pop(best)
                kept.append(unit)
        for rect in detected:
            kept.append(TrackEntity(rect, id=self._next_id))
            self._next_id += 1
        self.units = kept
        return list(kept)

    def annotate(self, image: np.ndarray) -> np.ndarray:
        """Return a copy of a 3-channel frame with boxes, ids and a unit count drawn on it."""
        arr = np.asarray(image)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError("annotate needs a 3-channel image")
        canvas = Image.fromarray(np.ascontiguousarray(arr, dtype=np.uint8))
        draw = ImageDraw.Draw(canvas)
        font = ImageFont.load_default()
        for unit in self.units:
            rect = unit.bounding_rect
            draw.rectangle(
                [rect.x, rect.y, rect.x + rect.width, rect.y + rect.height],
                outline=unit.color,
                width=2,
            )
            label = str(unit.id)
            left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
            cx, cy = rect.center()
            origin = (cx - (right - left) // 2, cy - (bottom - top) // 2)
            draw.text(origin, label, fill=unit.color, font=font)
        summary = f"Active units: {len(self.units)}"
        _, top, _, bottom = draw.textbbox((0, 0), summary, font=font)
        draw.text((5, max(0, 20 - (bottom - top))), summary, fill=(255, 255, 255), font=font)
        return np.asarray(canvas).copy()


def run_tracking(inqueue: DataQueue, outqueue: DataQueue) -> None:
    """Track units in every frame from inqueue and pass annotated frames on."""
    tracker = Tracker()
    try:
        while True:
            image = inqueue.get()
            tracker.update(image)
            outqueue.put(tracker.annotate(image))
    except QueueClosed:
        pass
    finally:
        inqueue.shut_down()
        outqueue.shut_down()