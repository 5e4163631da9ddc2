"""Playback state machine turning timestamps into eased segment progress."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import MorphConfig

logger = logging.getLogger(__name__)


class TimelineState(str, Enum):
    IDLE = 'idle'
    PLAYING = 'playing'
    PAUSED = 'paused'
    DONE = 'done'


@dataclass(frozen=True)
class Frame:
    iteration: int
    segment_index: int
    progress: float
    forward: bool
    eased: float
    finished: bool = False


def split_progress(eased: float, segment_count: int) -> tuple[int, float]:
    """Map a global fraction to ``(segment_index, local_progress)``."""
    eased = min(max(eased, 0.0), 1.0)
    index = min(int(math.floor(eased * segment_count)), segment_count - 1)
    return index, (eased - index / segment_count) * segment_count


class Timeline:
    """Tracks playback of ``segment_count`` segments under ``config``.

    All timestamps are milliseconds on the caller's clock.
    """

    def __init__(self, config: MorphConfig, segment_count: int = 0):
        self.config = config
        self.segment_count = segment_count
        self._reset()

    def _reset(self) -> None:
        self.start: Optional[float] = None
        self.iteration: Optional[int] = None
        self.segment_index: Optional[int] = None
        self.forward: Optional[bool] = None
        self.playing = False
        self.paused: Optional[float] = None
        self.done = False

    @property
    def state(self) -> TimelineState:
        if self.playing:
            return TimelineState.PLAYING
        if self.paused is not None:
            return TimelineState.PAUSED
        if self.done:
            return TimelineState.DONE
        return TimelineState.IDLE

    @property
    def enabled(self) -> bool:
        return self.config.duration > 0 and self.segment_count > 0

    def play(self, time: float) -> None:
        if self.playing:
            return
        if not self.enabled:
            logger.info("Nothing to animate (duration=%s, segments=%d)", self.config.duration, self.segment_count)
            self._reset()
            self.done = True
            return
        if self.start is None:
            self.start = time
        elif self.paused is not None:
            self.start = time - (self.paused - self.start)
        self.playing = True
        self.paused = None
        self.done = False
        logger.debug("Timeline playing from start=%s", self.start)

    def pause(self, time: float) -> None:
        if not self.playing:
            return
        self.playing = False
        self.paused = time
        self.done = False

    def stop(self) -> None:
        self._reset()

    def elapsed(self, time: float) -> float:
        if self.start is None:
            return 0.0
        if self.paused is not None:
            return self.paused - self.start
        return time - self.start

    def _frame(self, iteration: int, local: float, *, finished: bool = False) -> Frame:
        forward = not self.config.alternate or iteration % 2 == 0
        fraction = local if forward else 1.0 - local
        eased = min(max(float(self.config.easing(fraction)), 0.0), 1.0)
        index, progress = split_progress(eased, self.segment_count)
        return Frame(iteration, index, progress, forward, eased, finished)

    def advance(self, time: float) -> Optional[Frame]:
        """Compute the frame for ``time``; None when not playing."""
        if not self.playing or self.start is None:
            return None
        if not self.enabled:
            # duration or keyframes changed under a running playback
            logger.info("Nothing to animate (duration=%s, segments=%d)", self.config.duration, self.segment_count)
            self._reset()
            self.done = True
            return None
        duration = self.config.duration
        elapsed = max(time - self.start, 0.0)
        iteration = int(elapsed // duration)
        iterations = self.config.iterations

        if iterations >= 0 and iteration > iterations:
            frame = self._frame(iterations, 1.0, finished=True)
            logger.info("Playback finished after %d iteration(s)", iterations + 1)
            self._reset()
            return frame

        frame = self._frame(iteration, (elapsed % duration) / duration)
        self.iteration = iteration
        self.segment_index = frame.segment_index
        self.forward = frame.forward
        return frame
