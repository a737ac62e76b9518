"""Tests for slingrace/renderer.py — palette, draw dispatch, culling."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from slingrace.track import import_track
from tests.svg_fixtures import MOCK_GAME_CONFIG, MOCK_TRACK_SVG, make_svg


@pytest.fixture
def track():
    return import_track(MOCK_TRACK_SVG, MOCK_GAME_CONFIG)


class TestPalette:
    def test_palette_slots(self):
        from slingrace.renderer import _TRACK_PALETTE
        assert _TRACK_PALETTE[0] == 0x87CEEB
        assert len(_TRACK_PALETTE) == 6
        for slot, val in _TRACK_PALETTE.items():
            assert isinstance(val, int), f"Slot {slot} value is not int"

    @patch("slingrace.renderer.pyxel")
    def test_init_palette_sets_colours(self, mock_pyxel):
        from slingrace.renderer import init_palette
        init_palette()
        assert mock_pyxel.colors.__setitem__.call_count == 6


class TestDrawTrack:
    @patch("slingrace.renderer.pyxel")
    def test_draws_every_part(self, mock_pyxel, track):
        from slingrace.renderer import COL_OBSTACLE, draw_track
        draw_track(track)
        # backdrop, track, 2 walls, rect obstacle, start band, finish band
        assert mock_pyxel.rect.call_count == 7
        mock_pyxel.circ.assert_called_once()
        assert mock_pyxel.circ.call_args.args[3] == COL_OBSTACLE

    @patch("slingrace.renderer.pyxel")
    def test_draw_order(self, mock_pyxel, track):
        from slingrace.renderer import (
            COL_FINISH,
            COL_OUT_OF_BOUNDS,
            COL_START,
            COL_TRACK,
            COL_WALL,
            draw_track,
        )
        draw_track(track)
        colours = [c.args[4] for c in mock_pyxel.rect.call_args_list]
        assert colours[0] == COL_OUT_OF_BOUNDS
        assert colours[1] == COL_TRACK
        assert colours[2:4] == [COL_WALL, COL_WALL]
        assert colours[-2:] == [COL_START, COL_FINISH]

    @patch("slingrace.renderer.pyxel")
    def test_camera_offset(self, mock_pyxel, track):
        from slingrace.renderer import draw_track
        draw_track(track, camera_x=10, camera_y=20)
        x, y = mock_pyxel.rect.call_args_list[1].args[:2]
        assert x == pytest.approx(track.bounds.x - 10)
        assert y == pytest.approx(track.bounds.y - 20)

    @patch("slingrace.renderer.pyxel")
    def test_offscreen_culled(self, mock_pyxel, track):
        from slingrace.renderer import draw_track
        draw_track(track, camera_x=5000, camera_y=5000)
        assert not mock_pyxel.rect.called
        assert not mock_pyxel.circ.called

    @patch("slingrace.renderer.pyxel")
    def test_no_markers(self, mock_pyxel):
        from slingrace.renderer import draw_track
        svg = make_svg('<rect x="0" y="0" width="1000" height="500" fill="#00FF00"/>')
        draw_track(import_track(svg, MOCK_GAME_CONFIG))
        assert mock_pyxel.rect.call_count == 2
