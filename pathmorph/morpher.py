"""Keyframe morphing of SVG path outlines."""

from __future__ import annotations

import logging
import time
import xml.etree.ElementTree as ET
from dataclasses import replace
from typing import Any, Callable, Iterable, Iterator, List, Optional, Protocol, Tuple

from .ast import Segment, Step
from .config import (
    MorphConfig,
    build_config,
    get_default_config,
    sanitize_duration,
    sanitize_easing,
    sanitize_iterations,
)
from .interpolate import interpolate_segment
from .parser import parse_step
from .printer import print_commands
from .timeline import Frame, Timeline, TimelineState, split_progress
from .unify import build_segments
from .validate import ValidationError, validate_pair

logger = logging.getLogger(__name__)

TickCallback = Callable[..., Optional[str]]
Scheduler = Callable[[TickCallback], Any]


class HostError(ValidationError):
    """Raised when the shape element handed to a morpher is unusable."""


class PathHost(Protocol):
    def get_path(self) -> str:
        ...

    def set_path(self, d: str) -> None:
        ...


class ElementHost:
    """Adapter exposing the ``d`` attribute of an ElementTree ``<path>``."""

    def __init__(self, element: ET.Element):
        self.element = element

    def get_path(self) -> str:
        return self.element.get('d', '')

    def set_path(self, d: str) -> None:
        self.element.set('d', d)


class RecordingHost:
    """In-memory host that keeps every description written to it."""

    def __init__(self, d: str = ''):
        self.d = d
        self.history: List[str] = []

    def get_path(self) -> str:
        return self.d

    def set_path(self, d: str) -> None:
        self.d = d
        self.history.append(d)


def resolve_host(host: Any) -> PathHost:
    if host is None:
        raise HostError("no shape element given")
    if isinstance(host, ET.Element):
        tag = host.tag.rsplit('}', 1)[-1]
        if tag != 'path':
            raise HostError(f"expected a <path> element, got <{tag}>")
        return ElementHost(host)
    if callable(getattr(host, 'get_path', None)) and callable(getattr(host, 'set_path', None)):
        return host
    raise HostError(f"unsupported shape element of type {type(host).__name__}")


def _now_ms() -> float:
    return time.perf_counter() * 1000.0


class Morpher:
    """Animate a path element through a sequence of keyframe outlines.

    The host's current description is read once and becomes the first
    keyframe.  Further keyframes are appended with :meth:`add_keyframe`.
    Ticks are driven by ``scheduler`` (called with :meth:`tick` after every
    frame while playing) or by calling :meth:`tick` directly.
    """

    def __init__(
        self,
        host: Any,
        keyframes: Iterable[str] = (),
        config: Optional[MorphConfig] = None,
        *,
        scheduler: Optional[Scheduler] = None,
        clock: Optional[Callable[[], float]] = None,
        **options: Any,
    ):
        self.config = build_config(options, base=config)
        self.scheduler = scheduler
        self.clock = clock or _now_ms
        self.steps: List[Step] = []
        self._segments: Optional[Tuple[Segment, ...]] = None
        self.timeline = Timeline(self.config)
        self.host: Optional[PathHost] = None
        try:
            self.host = resolve_host(host)
        except HostError as exc:
            logger.error("Morpher disabled: %s", exc)
            return
        self.add_keyframe(self.host.get_path())
        for keyframe in keyframes:
            self.add_keyframe(keyframe)

    @property
    def usable(self) -> bool:
        return self.host is not None

    @property
    def state(self) -> TimelineState:
        return self.timeline.state

    @property
    def segments(self) -> Tuple[Segment, ...]:
        if self._segments is None:
            self._segments = build_segments(self.steps)
        return self._segments

    def add_keyframe(self, d: str) -> "Morpher":
        step = parse_step(d)
        if self.steps:
            validate_pair(self.steps[-1], step, len(self.steps))
        self.steps.append(step)
        self._segments = None
        self.timeline.segment_count = max(len(self.steps) - 1, 0)
        logger.debug("Added keyframe %d (%d instruction(s))", len(self.steps) - 1, len(step))
        return self

    def set_duration(self, duration: Any) -> "Morpher":
        self.config.duration = sanitize_duration(duration, get_default_config().duration)
        return self

    def set_iterations(self, iterations: Any) -> "Morpher":
        self.config.iterations = sanitize_iterations(iterations, get_default_config().iterations)
        return self

    def set_alternate(self, alternate: Any) -> "Morpher":
        self.config.alternate = bool(alternate)
        return self

    def set_easing(self, easing: Any) -> "Morpher":
        self.config.easing = sanitize_easing(easing, get_default_config().easing)
        return self

    def play(self, time: Optional[float] = None) -> None:
        if not self.usable or self.timeline.playing:
            return
        now = self.clock() if time is None else time
        self.timeline.play(now)
        if self.timeline.playing:
            self.tick(now)

    def pause(self, time: Optional[float] = None) -> None:
        if not self.usable:
            return
        self.timeline.pause(self.clock() if time is None else time)

    def stop(self) -> None:
        self.timeline.stop()

    def tick(self, timestamp: Optional[float] = None) -> Optional[str]:
        """Render and write the frame for ``timestamp``.

        Returns the written description, or None when nothing is playing.
        """
        if not self.usable or not self.timeline.playing:
            return None
        now = self.clock() if timestamp is None else timestamp
        frame = self.timeline.advance(now)
        if frame is None:
            return None
        logger.debug(
            "Frame iteration=%d segment=%d progress=%.3f forward=%s",
            frame.iteration,
            frame.segment_index,
            frame.progress,
            frame.forward,
        )
        d = self.render_frame(frame)
        self.host.set_path(d)
        if self.timeline.playing and self.scheduler is not None:
            self.scheduler(self.tick)
        return d

    def render_frame(self, frame: Frame) -> str:
        return self.render_segment(frame.segment_index, frame.progress)

    def render_segment(self, index: int, progress: float) -> str:
        commands = interpolate_segment(self.segments[index], progress)
        return print_commands(commands, precision=self.config.precision)

    def render(self, progress: float) -> str:
        """Render the whole morph at global fraction ``progress`` (no easing)."""
        if not self.segments:
            raise ValueError("at least two keyframes are needed to render a morph")
        return self.render_segment(*split_progress(progress, len(self.segments)))

    def frames(self, fps: float = 60.0) -> Iterator[Tuple[float, str]]:
        """Yield ``(timestamp, d)`` for one playback on a synthetic clock.

        Endless playback is sampled as one cycle (two iterations when
        alternating) ending on its terminal frame.
        """
        if fps <= 0:
            raise ValueError("fps must be positive")
        config = self.config
        if config.iterations < 0:
            config = replace(config, iterations=1 if config.alternate else 0)
        timeline = Timeline(config, len(self.segments))
        timeline.play(0.0)
        if not timeline.playing:
            return
        step = 1000.0 / fps
        count = 0
        while True:
            now = count * step
            frame = timeline.advance(now)
            if frame is None:
                break
            yield now, self.render_frame(frame)
            if frame.finished:
                break
            count += 1
