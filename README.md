# garment_tracker

A small multi-threaded vision pipeline. It replays a directory of images as a
looping virtual camera and thresholds each frame into a black and white mask.
It then tracks the bright blobs in the masks from frame to frame, giving each
a stable numeric id, and shows the annotated frames in a window.

## Pipeline

Four stages pass frames to one another through bounded queues
(`garment_tracker.data_queue.DataQueue`). The camera, segmentation and
tracking stages run in their own threads; the display runs in the main
thread.

1. **Camera** (`garment_tracker.camera.run_virtual_camera`) lists the
   directory in sorted order. It loads each entry as a BGR array and cycles
   through them at the given frame rate. Its output queue holds only the
   newest frame.
2. **Segmentation** (`garment_tracker.segment.run_segmentation`) converts each
   frame to grey. Pixels brighter than 100 become white (255); all others
   become black.
3. **Tracking** (`garment_tracker.track.run_tracking`) handles each mask in
   four steps:
   - It finds connected bright regions, with diagonal neighbours counted as
     connected. It keeps a region only if its contour area is at least 100
     and its bounding box stays clear of the left and right image borders.
   - In turn, each tracked unit takes the nearest remaining detection,
     measured between box centres, if that detection is closer than 50
     pixels.
   - Units that find no match are dropped.
   - Each leftover detection becomes a new unit with the next id.

   It then draws each unit's box and id in the unit's own random colour,
   along with an `Active units: N` line.
4. **Display** (`garment_tracker.display.run_display`) shows the frames in a
   matplotlib window titled "Camera". It stops when the window is closed or
   its queue is shut down, and returns the number of frames shown.

## Installation

```
pip install .
```

## Usage

```
garment-tracker [--images DIR] [--fps N]
```

- `--images`: the directory of frames. It defaults to `../images/`, relative
  to the working directory. Every entry in it is read as an image, so it
  should hold nothing else.
- `--fps`: the replay frame rate. It defaults to `30` and must be positive.

The command exits with an error if the directory cannot be read or is empty.
It runs until the display window is closed. At that point it shuts down
every queue, waits for the worker threads and prints `End of main!`.

## Using the parts

The stages can also be used one at a time:

```python
from garment_tracker.camera import image_paths, load_image
from garment_tracker.segment import segment
from garment_tracker.track import Tracker

tracker = Tracker()
for path in image_paths("images/"):
    mask = segment(load_image(path))
    units = tracker.update(mask)      # list of TrackEntity
    annotated = tracker.annotate(mask)  # new array; the input is left untouched
```

Other helpers:

- `garment_tracker.track.detect_units(image)` returns the detected `Rect`s in
  one frame.
- `rect_distance(a, b)` measures the distance between the centres of two
  rectangles.
- `bounding_rect(points)` returns the rectangle spanning a set of `(x, y)`
  points.

`garment_tracker.track_entity.TrackEntity` holds the following:

- `bounding_rect`
- `id`: `-1` until one is assigned.
- `color`: a random RGB triple.
- `uuid`: built from the creation time and the colour.

`DataQueue` has the following methods:

- `put(item, max_len=3)`: if the queue already holds `max_len` items, the
  oldest is dropped first.
- `get()`: blocks until an item is available, then removes and returns the
  oldest.
- `get_last()`: blocks until an item is available, then returns the newest
  without removing it.
- `shut_down()`: closes the queue. Once a closed queue is empty, reading
  from it raises `QueueClosed`; writing to a closed queue raises it at once.

## What it does not do

The camera stage only replays image files from a directory. The package
cannot capture from a real camera or a video file, and it does not save the
annotated frames.

## Tests

```
pip install .[test]
pytest
```