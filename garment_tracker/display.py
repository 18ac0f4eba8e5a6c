"""Window that shows the frames coming out of the pipeline."""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np

from .data_queue import DataQueue, QueueClosed


def run_display(inqueue: DataQueue) -> int:
    """Show each BGR frame from inqueue until it closes or the window is closed.

    Returns the number of frames shown.
    """
    fig, ax = plt.subplots(num="Camera")
    ax.set_axis_off()
    artist = None
    shown = 0
    try:
        while plt.fignum_exists(fig.number):
            try:
                image = np.asarray(inqueue.get())
            except QueueClosed:
                break
            rgb = image[..., ::-1] if image.ndim == 3 else image
            if artist is None:
                artist = ax.imshow(rgb)
            else:
                artist.set_data(rgb)
            shown += 1
            plt.pause(0.001)
    finally:
        inqueue.shut_down()
        plt.close(fig)
    return shown