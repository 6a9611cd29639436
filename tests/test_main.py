"""Tests for the command line entry point."""

import json

import pytest

import main
from scenes.default import create_default_scene
from scenes.loader import save_scene


def run(tmp_path, *extra, output="out.ppm"):
    out = tmp_path / output
    argv = ["--width", "8", "--height", "6", "--quality", "preview", "--workers", "1",
            "-o", str(out), *extra]
    return main.main(argv), out


class TestMain:

    def test_renders_ppm(self, tmp_path):
        code, out = run(tmp_path)
        assert code == 0
        assert out.read_bytes().startswith(b"P6\n8 6\n255\n")
        assert len(out.read_bytes()) == len(b"P6\n8 6\n255\n") + 8 * 6 * 3

    def test_renders_png(self, tmp_path):
        code, out = run(tmp_path, output="out.png")
        assert code == 0
        assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_scene_file(self, tmp_path):
        scene_path = tmp_path / "scene.json"
        save_scene(create_default_scene(), str(scene_path))
        code, out = run(tmp_path, "--scene", str(scene_path))
        assert code == 0
        assert out.exists()

    def test_missing_scene_file(self, tmp_path):
        code, out = run(tmp_path, "--scene", str(tmp_path / "missing.json"))
        assert code == 1
        assert not out.exists()

    def test_bad_scene_file(self, tmp_path):
        scene_path = tmp_path / "scene.json"
        scene_path.write_text(json.dumps({"spheres": [{"radius": 1}]}), encoding="utf-8")
        code, _ = run(tmp_path, "--scene", str(scene_path))
        assert code == 1

    def test_scene_path_is_directory(self, tmp_path):
        code, out = run(tmp_path, "--scene", str(tmp_path))
        assert code == 1
        assert not out.exists()

    def test_unwritable_output(self, tmp_path):
        code, _ = run(tmp_path, output="missing_dir/out.ppm")
        assert code == 1

    def test_unknown_quality_is_rejected(self, tmp_path):
        with pytest.raises(SystemExit):
            run(tmp_path, "--quality", "ultra")

    def test_unknown_log_level_is_rejected(self, tmp_path):
        with pytest.raises(SystemExit):
            run(tmp_path, "--log-level", "basic_format")

    def test_log_level_is_case_insensitive(self, tmp_path):
        code, _ = run(tmp_path, "--log-level", "debug")
        assert code == 0


class TestRenderApplication:

    @pytest.mark.parametrize("quality,extra,depth,antialias", [
        ("preview", [], 0, False),
        ("balanced", [], 3, False),
        ("high_quality", [], 3, True),
        ("high_quality", ["--no-antialias"], 3, False),
        ("preview", ["--depth", "5"], 5, False),
    ])
    def test_quality_settings(self, quality, extra, depth, antialias):
        args = main.build_parser().parse_args(["--quality", quality, *extra])
        app = main.RenderApplication(args)
        assert app.renderer.max_depth == depth
        assert app.renderer.antialias is antialias
