"""Exception hierarchy.

Recoverable problems inside a path or attribute set are reported as
diagnostics (see ``models/diagnostics.py``); exceptions are reserved for
input the caller cannot get partial output from.
"""

from __future__ import annotations


class SvgPathError(Exception):
    """Base class for all package errors."""


class ColorParseError(SvgPathError, ValueError):
    """Colour text is not a ``#RGB`` / ``#RRGGBB`` hex triplet."""


class SvgStructureError(SvgPathError):
    """The SVG document itself is malformed; fatal to that document."""


class StyleSyntaxError(SvgPathError, ValueError):
    """A ``style`` entry has no value for its key."""
