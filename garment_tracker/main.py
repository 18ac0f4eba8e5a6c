"""Command line entry point that wires up the camera, segmentation, tracking and display."""

from __future__ import annotations

import argparse
import threading

from .camera import image_paths, run_virtual_camera
from .data_queue import DataQueue
from .display import run_display
from .segment import run_segmentation
from .track import run_tracking


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="garment_tracker",
        description="Segment and track garments in a replayed image sequence.",
    )
    parser.add_argument("--images", default="../images/", help="directory of frames")
    parser.add_argument("--fps", type=int, default=30, help="replay frame rate")
    args = parser.parse_args(argv)

    if args.fps <= 0:
        parser.error("--fps must be positive")
    try:
        paths = image_paths(args.images)
    except OSError as exc:
        parser.error(f"cannot read image directory {args.images}: {exc}")
    if not paths:
        parser.error(f"no images in {args.images}")

    segmentation_queue: DataQueue = DataQueue()
    tracking_queue: DataQueue = DataQueue()
    display_queue: DataQueue = DataQueue()

    workers = [
        threading.Thread(
            target=run_virtual_camera,
            args=(args.images, args.fps, segmentation_queue),
            daemon=True,
        ),
        threading.Thread(
            target=run_segmentation, args=(segmentation_queue, tracking_queue), daemon=True
        ),
        threading.Thread(target=run_tracking, args=(tracking_queue, display_queue), daemon=True),
    ]
    for worker in workers:
        worker.start()

    run_display(display_queue)

    for queue in (segmentation_queue, tracking_queue, display_queue):
        queue.shut_down()
    for worker in workers:
        worker.join()

    print("End of main!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())