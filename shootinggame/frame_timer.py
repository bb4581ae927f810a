"""Frame timing with optional fixed frame rate."""

import time

ONE_SECOND = 1_000_000
MAX_DELTA_TIME_FACTOR = 5
DEFAULT_REFRESH_RATE = 60


def _microseconds():
    return time.perf_counter_ns() // 1000


class FrameTimer:
    """Measures frame times in microseconds and decides when to update.

    With ``fps`` given the timer runs at a fixed rate, capped by the
    refresh rate; with ``fps`` of None every frame is an update frame.
    """

    def __init__(self, fps=None, refresh_rate=DEFAULT_REFRESH_RATE, clock=None):
        if refresh_rate <= 0:
            raise ValueError("refresh rate must be positive")
        if fps is not None and fps <= 0:
            raise ValueError("fps must be positive")
        self._clock = clock if clock is not None else _microseconds
        self._is_fixed_fps = fps is not None
        rate = refresh_rate if fps is None else min(fps, refresh_rate)
        self._target_elapsed_time = ONE_SECOND // rate
        self.reset()

    def reset(self):
        """Discard all measurements and start again from now."""
        self._last_time = self._clock()
        self._accumulated_time = 0
        self._start_time = self._last_time
        self._elapsed_time = ONE_SECOND
        self._frame_count = 0
        self._frame_rate = 0
        self._is_update_frame = False

    def update(self):
        """Advance the timer by the time passed since the previous call."""
        current_time = self._clock()
        delta_time = current_time - self._last_time

        if delta_time > self._target_elapsed_time * MAX_DELTA_TIME_FACTOR:
            delta_time = self._target_elapsed_time

        if self._is_fixed_fps:
            self._accumulated_time += delta_time
            self._is_update_frame = self._accumulated_time >= self._target_elapsed_time
            if self._is_update_frame:
                self._frame_count += 1
                self._elapsed_time = self._target_elapsed_time
                self._accumulated_time -= self._target_elapsed_time
        else:
            self._is_update_frame = True
            self._frame_count += 1
            self._elapsed_time = delta_time

        if current_time - self._start_time >= ONE_SECOND:
            self._frame_rate = self._frame_count
            self._frame_count = 0
            self._start_time = current_time

        self._last_time = current_time

    @property
    def is_update_frame(self):
        """Whether the game should be updated this frame."""
        return self._is_update_frame

    @property
    def elapsed_time(self):
        """Seconds covered by the last update frame."""
        return self._elapsed_time / ONE_SECOND

    @property
    def frame_rate(self):
        """Update frames counted over the last full second."""
        return self._frame_rate