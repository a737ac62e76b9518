"""Tests for tools/svg2track.py — SVG-to-track CLI."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

# Add tools/ to import path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "tools"))

from svg2track import TrackWriter, build_track_document, main  # noqa: E402

from slingrace.config import BoundaryPolicy
from slingrace.track import import_track, validate_track_data
from tests.svg_fixtures import MOCK_GAME_CONFIG, MOCK_TRACK_SVG, make_svg

REPO_ROOT = Path(__file__).parent.parent


def _write_svg(tmp_path, content: str):
    path = tmp_path / "track.svg"
    path.write_text(content, encoding="utf-8")
    return path


class TestBuildTrackDocument:
    def test_contents(self):
        track = import_track(MOCK_TRACK_SVG, MOCK_GAME_CONFIG)
        doc = build_track_document(track, BoundaryPolicy.NONE)
        assert [w["id"] for w in doc["walls"]] == ["wall-top", "wall-bottom"]
        assert "radius" in doc["obstacles"][0]["shape"]
        assert "width" in doc["obstacles"][1]["shape"]
        assert doc["metadata"]["original_svg_size"] == {"width": 1000, "height": 500}
        assert doc["metadata"]["element_counts"]["track_areas"] == 1
        assert doc["boundary_policy"] == "none"
        assert doc["boundary_count"] == 0
        assert doc["start_position"] is not None
        json.dumps(doc)

    def test_missing_markers_are_null(self):
        svg = make_svg('<rect x="0" y="0" width="1000" height="500" fill="#00FF00"/>')
        doc = build_track_document(import_track(svg, MOCK_GAME_CONFIG), BoundaryPolicy.NONE)
        assert doc["start_line"] is None
        assert doc["finish_position"] is None


class TestTrackWriter:
    def test_writes_files(self, tmp_path):
        track = import_track(MOCK_TRACK_SVG, MOCK_GAME_CONFIG)
        out = tmp_path / "out"
        TrackWriter(str(out)).write(
            build_track_document(track, BoundaryPolicy.NONE), validate_track_data(track),
        )
        data = json.loads((out / "track.json").read_text())
        assert len(data["walls"]) == 2
        assert (out / "validation_report.txt").read_text() == "No issues found.\n"

    def test_report_lists_warnings(self, tmp_path):
        svg = make_svg('<rect x="0" y="0" width="1000" height="500" fill="#00FF00"/>')
        track = import_track(svg, MOCK_GAME_CONFIG)
        TrackWriter(str(tmp_path)).write(
            build_track_document(track, BoundaryPolicy.NONE), validate_track_data(track),
        )
        report = (tmp_path / "validation_report.txt").read_text()
        assert "WARNING: No start line found in track" in report


class TestMain:
    def test_end_to_end(self, tmp_path, capsys):
        svg_path = _write_svg(tmp_path, MOCK_TRACK_SVG)
        out = tmp_path / "out"
        main([str(svg_path), str(out), "--boundary-policy", "perimeter-strips"])
        data = json.loads((out / "track.json").read_text())
        assert data["boundary_count"] == 4
        assert "Imported: 1 track areas, 2 walls, 2 obstacles" in capsys.readouterr().out

    def test_config_file(self, tmp_path):
        svg_path = _write_svg(tmp_path, MOCK_TRACK_SVG)
        config_path = tmp_path / "game.yaml"
        config_path.write_text("world_width: 2000\nworld_height: 1000\n")
        out = tmp_path / "out"
        main([str(svg_path), str(out), "--config", str(config_path)])
        data = json.loads((out / "track.json").read_text())
        assert data["metadata"]["scale_factor"] == pytest.approx(1.8)

    def test_missing_input(self, tmp_path):
        with pytest.raises(SystemExit) as info:
            main([str(tmp_path / "missing.svg"), str(tmp_path / "out")])
        assert info.value.code == 1

    def test_import_failure(self, tmp_path, capsys):
        svg_path = _write_svg(tmp_path, make_svg('<rect fill="#FF0000"/>'))
        with pytest.raises(SystemExit) as info:
            main([str(svg_path), str(tmp_path / "out")])
        assert info.value.code == 1
        assert "No track areas found in SVG" in capsys.readouterr().err


class TestCLIInvocation:
    def _run(self, *args):
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(REPO_ROOT), env.get("PYTHONPATH")) if p
        )
        return subprocess.run(
            [sys.executable, "tools/svg2track.py", *args],
            capture_output=True,
            text=True,
            cwd=REPO_ROOT,
            env=env,
        )

    def test_cli_invocation(self, tmp_path):
        svg_path = _write_svg(tmp_path, MOCK_TRACK_SVG)
        out = tmp_path / "out"
        result = self._run(str(svg_path), str(out))
        assert result.returncode == 0, f"CLI failed: {result.stderr}"
        for fname in ["track.json", "validation_report.txt"]:
            assert (out / fname).is_file(), f"Missing {fname}"

    def test_cli_single_track_rect(self, tmp_path):
        svg_path = _write_svg(
            tmp_path, make_svg('<rect x="0" y="0" width="1000" height="500" fill="#00FF00"/>'),
        )
        out = tmp_path / "out"
        result = self._run(str(svg_path), str(out))
        assert result.returncode == 0, f"CLI failed: {result.stderr}"
        assert "Imported: 1 track areas, 0 walls, 0 obstacles" in result.stdout

    def test_cli_import_failure_exit_code(self, tmp_path):
        svg_path = _write_svg(tmp_path, "<svg><rect></svg>")
        result = self._run(str(svg_path), str(tmp_path / "out"))
        assert result.returncode == 1
        assert "SVG parsing failed" in result.stderr
