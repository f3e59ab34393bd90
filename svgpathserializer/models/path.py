"""In-memory path model — points, segments and the Path container.

A Path owns an ordered list of immutable segments. Its current point is
derived from the segments, never stored alongside them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import NamedTuple, Union

import numpy as np

from svgpathserializer.models.diagnostics import Diagnostic
from svgpathserializer.utils.geometry import bbox


class Point(NamedTuple):
    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class MoveTo:
    point: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.point,)


@dataclass(frozen=True)
class LineTo:
    point: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.point,)


@dataclass(frozen=True)
class QuadCurveTo:
    control: Point
    end: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.control, self.end)


@dataclass(frozen=True)
class CubicCurveTo:
    control1: Point
    control2: Point
    end: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.control1, self.control2, self.end)


@dataclass(frozen=True)
class ClosePath:
    @property
    def points(self) -> tuple[Point, ...]:
        return ()


Segment = Union[MoveTo, LineTo, QuadCurveTo, CubicCurveTo, ClosePath]


@dataclass
class Path:
    """Ordered sequence of segments built by one parse call."""

    segments: list[Segment] = field(default_factory=list)
    # Index of the last MoveTo among the first _scanned segments
    _start_index: int | None = field(default=None, init=False, repr=False, compare=False)
    _scanned: int = field(default=0, init=False, repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def append(self, segment: Segment) -> None:
        self.segments.append(segment)

    @property
    def current_point(self) -> Point:
        """Pen position: end of the last segment, or the subpath start after a close."""
        if not self.segments:
            return ORIGIN
        last = self.segments[-1]
        if isinstance(last, ClosePath):
            return self.subpath_start
        return last.points[-1]

    @property
    def subpath_start(self) -> Point:
        """Start point of the most recent subpath (origin if no MoveTo yet).

        Only segments added since the previous lookup are scanned, so reading
        the current point while appending stays linear over the whole path.
        """
        n = len(self.segments)
        stale = self._start_index is not None and (
            self._start_index >= n or not isinstance(self.segments[self._start_index], MoveTo)
        )
        if n < self._scanned or stale:
            self._start_index, self._scanned = None, 0
        for i in range(self._scanned, n):
            if isinstance(self.segments[i], MoveTo):
                self._start_index = i
        self._scanned = n
        if self._start_index is None:
            return ORIGIN
        return self.segments[self._start_index].point

    def subpaths(self) -> Iterator[list[Segment]]:
        """Yield runs of segments split at MoveTo and after ClosePath."""
        current: list[Segment] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo) and current:
                yield current
                current = []
            current.append(seg)
            if isinstance(seg, ClosePath):
                yield current
                current = []
        if current:
            yield current

    def points(self) -> list[Point]:
        """Every endpoint and control point, in segment order."""
        return [pt for seg in self.segments for pt in seg.points]

    def bounds(self) -> tuple[float, float, float, float] | None:
        """Axis-aligned (xmin, ymin, xmax, ymax) over endpoints and control points."""
        pts = self.points()
        if not pts:
            return None
        return bbox(np.array(pts, dtype=np.float64))


@dataclass
class ParseResult:
    """A parsed path plus everything the parser had to skip or report."""

    path: Path = field(default_factory=Path)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics
