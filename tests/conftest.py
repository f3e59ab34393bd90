"""Shared test fixtures."""

from __future__ import annotations

import pytest


SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <path id="wave" d="M10 80 C40 10, 65 10, 95 80 S150 150, 180 80" fill="none" stroke="#333"/>
  <rect x="10" y="20" width="30" height="40" style="fill:#4ECDC4;fill-opacity:0.5"/>
  <polygon points="0,0 10,0 10,10" fill="#F00" stroke-width="2"/>
</svg>'''

GROUPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <g fill="none">
    <path d="M3 10a2 2 0 0 1 .7-1.5l7-6 z"/>
    <circle cx="12" cy="12" r="10"/>
  </g>
  <path d="M4 4h16v16H4z" stroke="#ff0000" stroke-opacity="1"/>
</svg>'''

ROUND_TRIP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path d="M1,2 L3,4 C5,6 7,8 9,10 Z" fill="#102030"/>
</svg>'''

MALFORMED_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0"></svg>'


@pytest.fixture
def shapes_svg() -> str:
    return SHAPES_SVG


@pytest.fixture
def grouped_svg() -> str:
    return GROUPED_SVG


@pytest.fixture
def round_trip_svg() -> str:
    return ROUND_TRIP_SVG
