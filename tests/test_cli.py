"""Tests for the huedial command-line interface."""

from PIL import Image

from huedial.cli import main


class TestColorCommand:

    def test_prints_color(self, capsys):
        assert main(["color", "42.79"]) == 0
        out = capsys.readouterr().out
        assert "linear p3" in out
        assert "encoded p3" in out
        assert "jzazbz" in out

    def test_invalid_hue(self):
        assert main(["color", "nan"]) == 2

    def test_invalid_steps(self):
        assert main(["color", "10", "--steps", "0"]) == 2


class TestImageCommands:

    def test_strip(self, tmp_path):
        path = tmp_path / "strip.png"
        assert main(["strip", "--output", str(path), "--width", "36", "--height", "4"]) == 0
        with Image.open(path) as image:
            assert image.size == (36, 4)

    def test_dial(self, tmp_path):
        path = tmp_path / "dial.png"
        assert main(["dial", "--output", str(path), "--size", "32"]) == 0
        with Image.open(path) as image:
            assert image.size == (32, 32)

    def test_bad_size(self, tmp_path):
        assert main(["strip", "--output", str(tmp_path / "x.png"), "--width", "0"]) == 2
