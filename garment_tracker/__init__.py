"""Replay, segment, track and display garments from a looping image sequence."""

__version__ = "0.1.0"