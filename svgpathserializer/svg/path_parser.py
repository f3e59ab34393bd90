"""Path definition parser — SVG ``d`` text → Path.

Single pass over the text. A command letter is followed by a run of numbers
separated by commas and/or whitespace; the number run is split into groups of
the command's arity and each group emits one segment. Lowercase commands are
relative to the current point at the start of each group.

Parsing is best-effort: a bad command is reported as a Diagnostic and
skipped, and whatever was built is always returned.

Usage:
    result = parse_path_definition("M10,10 h20 v20 z")
    result.path.segments   # [MoveTo(...), LineTo(...), LineTo(...), ClosePath()]
    result.diagnostics     # []
"""

from __future__ import annotations

import logging
import math
import re

from svgpathserializer.models.diagnostics import Diagnostic, DiagnosticKind
from svgpathserializer.models.path import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    ParseResult,
    Path,
    Point,
    QuadCurveTo,
)
from svgpathserializer.utils.geometry import reflect

logger = logging.getLogger(__name__)

# Any ASCII letter except e/E, which only appear as number exponents
_COMMAND_RUN_RE = re.compile(r"[A-DF-Za-df-z]+")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SEPARATORS_RE = re.compile(r"[\s,]*")

# Operands consumed per repetition of each command
ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "Z": 0,
    "A": 7,
}

_CUBIC_COMMANDS = frozenset("CcSs")
_QUAD_COMMANDS = frozenset("QqTt")


class _PathDefinitionParser:
    """Per-call parser state. Never shared between calls."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._path = Path()
        self._diagnostics: list[Diagnostic] = []
        self._cmd = ""
        self._last_cmd = ""
        self._cmd_offset = 0
        self._operands: list[float] = []
        self._last_cubic_control: Point | None = None
        self._last_quad_control: Point | None = None

    def parse(self) -> ParseResult:
        while True:
            self._skip_separators()
            match = _COMMAND_RUN_RE.match(self._text, self._pos)
            if not match:
                break

            run = match.group(0)
            self._cmd_offset = self._pos
            self._operands = []
            # A run of several letters is a sequence of operand-less commands:
            # consume exactly one letter per iteration.
            self._pos += 1
            if len(run) == 1:
                self._scan_operands()

            self._last_cmd = self._cmd
            self._cmd = run[0]
            logger.debug("%s %s", self._cmd, self._operands)
            self._dispatch()

        self._skip_separators()
        if self._pos < len(self._text):
            message = f"SVG parse error at index {self._pos}: {self._text[self._pos]!r}"
            logger.warning("%s", message)
            self._diagnostics.append(
                Diagnostic(DiagnosticKind.TRAILING_DATA, message, offset=self._pos)
            )

        return ParseResult(path=self._path, diagnostics=self._diagnostics)

    # ── Scanning ─────────────────────────────────────────────────────────

    def _skip_separators(self) -> None:
        self._pos = _SEPARATORS_RE.match(self._text, self._pos).end()

    def _scan_operands(self) -> None:
        while True:
            start = self._pos
            self._skip_separators()
            match = _NUMBER_RE.match(self._text, self._pos)
            if not match:
                self._pos = start
                return
            self._operands.append(float(match.group(0)))
            self._pos = match.end()

    # ── Dispatch ─────────────────────────────────────────────────────────

    def _dispatch(self) -> None:
        cmd = self._cmd
        key = cmd.upper()

        if key not in ARITY:
            self._report(DiagnosticKind.COMMAND_ERROR, f"Cannot process command: {cmd!r}")
            return

        if key == "A":
            self._report(DiagnosticKind.UNSUPPORTED_FEATURE, "Elliptical arcs not supported")
            return

        if not all(math.isfinite(v) for v in self._operands):
            self._report(DiagnosticKind.COMMAND_ERROR, f"Out-of-range number in {cmd} parameters")
            return

        arity = ARITY[key]
        count = len(self._operands)
        if arity == 0 and count:
            self._report(
                DiagnosticKind.COMMAND_ERROR,
                f"{cmd} takes no parameters, got {count}",
            )
            return
        if arity and count % arity:
            self._report(
                DiagnosticKind.COMMAND_ERROR,
                f"Invalid parameter count for {cmd}: {count} is not a multiple of {arity}",
            )
            return

        relative = cmd.islower()
        if key == "M":
            self._append_move_to(relative)
        elif key == "L":
            self._append_line_to(relative)
        elif key == "H":
            self._append_horizontal(relative)
        elif key == "V":
            self._append_vertical(relative)
        elif key == "C":
            self._append_curve(relative)
        elif key == "S":
            self._append_shorthand_curve(relative)
        elif key == "Q":
            self._append_quad(relative)
        elif key == "T":
            self._append_shorthand_quad(relative)
        else:
            self._path.append(ClosePath())

    def _report(self, kind: DiagnosticKind, message: str) -> None:
        """Record a diagnostic against the command being dispatched."""
        logger.warning("%s (index %d)", message, self._cmd_offset)
        self._diagnostics.append(
            Diagnostic(kind, message, offset=self._cmd_offset, command=self._cmd)
        )

    # ── Segment builders ─────────────────────────────────────────────────

    def _groups(self, size: int) -> list[list[float]]:
        ops = self._operands
        return [ops[i : i + size] for i in range(0, len(ops), size)]

    def _origin(self, relative: bool) -> Point:
        return self._path.current_point if relative else Point(0.0, 0.0)

    def _append_move_to(self, relative: bool) -> None:
        for i, (x, y) in enumerate(self._groups(2)):
            o = self._origin(relative)
            point = Point(o.x + x, o.y + y)
            self._path.append(MoveTo(point) if i == 0 else LineTo(point))

    def _append_line_to(self, relative: bool) -> None:
        for x, y in self._groups(2):
            o = self._origin(relative)
            self._path.append(LineTo(Point(o.x + x, o.y + y)))

    def _append_horizontal(self, relative: bool) -> None:
        for value in self._operands:
            current = self._path.current_point
            x = value + (current.x if relative else 0.0)
            self._path.append(LineTo(Point(x, current.y)))

    def _append_vertical(self, relative: bool) -> None:
        for value in self._operands:
            current = self._path.current_point
            y = value + (current.y if relative else 0.0)
            self._path.append(LineTo(Point(current.x, y)))

    def _append_curve(self, relative: bool) -> None:
        # (x1, y1, x2, y2, x, y)
        for x1, y1, x2, y2, x, y in self._groups(6):
            o = self._origin(relative)
            control2 = Point(o.x + x2, o.y + y2)
            self._path.append(
                CubicCurveTo(Point(o.x + x1, o.y + y1), control2, Point(o.x + x, o.y + y))
            )
            self._last_cubic_control = control2

    def _append_shorthand_curve(self, relative: bool) -> None:
        if self._last_cmd not in _CUBIC_COMMANDS or self._last_cubic_control is None:
            self._last_cubic_control = self._path.current_point

        # (x2, y2, x, y)
        for x2, y2, x, y in self._groups(4):
            current = self._path.current_point
            o = current if relative else Point(0.0, 0.0)
            control1 = Point(*reflect(self._last_cubic_control, current))
            control2 = Point(o.x + x2, o.y + y2)
            self._path.append(CubicCurveTo(control1, control2, Point(o.x + x, o.y + y)))
            self._last_cubic_control = control2

    def _append_quad(self, relative: bool) -> None:
        # (x1, y1, x, y)
        for x1, y1, x, y in self._groups(4):
            o = self._origin(relative)
            control = Point(o.x + x1, o.y + y1)
            self._path.append(QuadCurveTo(control, Point(o.x + x, o.y + y)))
            self._last_quad_control = control

    def _append_shorthand_quad(self, relative: bool) -> None:
        if self._last_cmd not in _QUAD_COMMANDS or self._last_quad_control is None:
            self._last_quad_control = self._path.current_point

        # (x, y)
        for x, y in self._groups(2):
            current = self._path.current_point
            o = current if relative else Point(0.0, 0.0)
            control = Point(*reflect(self._last_quad_control, current))
            self._path.append(QuadCurveTo(control, Point(o.x + x, o.y + y)))
            self._last_quad_control = control


def parse_path_definition(text: str) -> ParseResult:
    """Parse SVG path definition text into a Path plus diagnostics."""
    return _PathDefinitionParser(text).parse()
