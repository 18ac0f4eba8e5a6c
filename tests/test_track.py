import numpy as np
import pytest

from garment_tracker.data_queue import DataQueue, QueueClosed
from garment_tracker.track import (
    Tracker,
    bounding_rect,
    detect_units,
    rect_distance,
    run_tracking,
)
from garment_tracker.track_entity import Rect


def _frame(blobs, width=200, height=120):
    image = np.zeros((height, width, 3), dtype=np.uint8)
    for x, y, w, h in blobs:
        image[y:y + h, x:x + w] = 255
    return image


def test_rect_distance_three_four_five():
    assert rect_distance(Rect(0, 0, 0, 0), Rect(3, 4, 0, 0)) == pytest.approx(5.0)


def test_rect_distance_symmetric_and_zero():
    a, b = Rect(10, 10, 8, 6), Rect(40, 25, 4, 4)
    assert rect_distance(a, a) == 0
    assert rect_distance(a, b) == rect_distance(b, a)


def test_bounding_rect_of_points():
    assert bounding_rect([(1, 2), (5, 3), (4, 8)]) == Rect(1, 2, 4, 6)


def test_bounding_rect_empty():
    with pytest.raises(ValueError):
        bounding_rect([])


def test_detect_square():
    assert detect_units(_frame([(30, 40, 20, 20)])) == [Rect(30, 40, 19, 19)]


def test_detect_area_threshold():
    assert len(detect_units(_frame([(30, 40, 11, 11)]))) == 1
    assert detect_units(_frame([(30, 40, 10, 10)])) == []


def test_detect_ignores_border_blobs():
    assert detect_units(_frame([(0, 40, 20, 20)])) == []
    assert detect_units(_frame([(180, 40, 20, 20)])) == []


def test_tracker_keeps_identity_when_moving():
    tracker = Tracker()
    first = tracker.update(_frame([(30, 40, 20, 20)]))
    assert [unit.id for unit in first] == [0]
    second = tracker.update(_frame([(35, 40, 20, 20)]))
    assert [unit.id for unit in second] == [0]
    assert second[0].bounding_rect.x == 35
    assert second[0].uuid == first[0].uuid


def test_tracker_new_id_for_far_unit():
    tracker = Tracker()
    tracker.update(_frame([(30, 40, 20, 20)]))
    units = tracker.update(_frame([(150, 40, 20, 20)]))
    assert [unit.id for unit in units] == [1]
    assert tracker.update(_frame([])) == []


def test_annotate_draws_box_in_unit_color():
    tracker = Tracker()
    image = _frame([(30, 40, 20, 20)])
    (unit,) = tracker.update(image)
    unit.color = (10, 200, 30)
    annotated = tracker.annotate(image)
    assert annotated.shape == image.shape
    assert tuple(annotated[40, 30]) == (10, 200, 30)
    assert tuple(image[40, 30]) == (255, 255, 255)


def test_annotate_rejects_gray_image():
    with pytest.raises(ValueError):
        Tracker().annotate(np.zeros((10, 10), dtype=np.uint8))


def test_run_tracking_drains_and_closes():
    inqueue, outqueue = DataQueue(), DataQueue()
    image = _frame([(30, 40, 20, 20)])
    inqueue.put(image)
    inqueue.shut_down()
    run_tracking(inqueue, outqueue)
    result = outqueue.get()
    assert result.shape == image.shape
    assert not np.array_equal(result, image)
    with pytest.raises(QueueClosed):
        outqueue.get()