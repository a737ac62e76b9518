"""SVG documents and builders shared by the track pipeline tests."""

from __future__ import annotations

import textwrap

from slingrace.config import GameConfig

MOCK_GAME_CONFIG = GameConfig(world_width=1024, world_height=768)

MOCK_TRACK_SVG = textwrap.dedent("""\
    <?xml version="1.0" encoding="UTF-8"?>
    <svg width="1000" height="500" xmlns="http://www.w3.org/2000/svg">
      <rect id="track" x="0" y="0" width="1000" height="500" fill="#00FF00"/>
      <rect id="wall-top" x="100" y="50" width="800" height="20" fill="#000000"/>
      <rect id="wall-bottom" x="100" y="430" width="800" height="20" fill="#000000"/>
      <circle id="rock" cx="500" cy="250" r="40" fill="#800080"/>
      <rect id="crate" x="300" y="200" width="50" height="50" fill="#800080"/>
      <rect id="start" x="150" y="100" width="10" height="300" fill="#0000FF"/>
      <line id="finish" x1="850" y1="100" x2="850" y2="400" stroke="#FFD700" stroke-width="10"/>
    </svg>""")


def make_svg(body: str, width: float = 1000, height: float = 500, extra: str = "") -> str:
    return textwrap.dedent(f"""\
        <svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" {extra}>
          {body}
        </svg>""")
