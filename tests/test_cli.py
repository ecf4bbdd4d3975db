"""
Tests for the resource helpers and the command-line interface.
"""

import io
import sys
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
import unittest
from PIL import Image

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from spritegrid import read_file, write_file, load_text_sprite
from spritegrid.cli import main, format_census
from spritegrid.color import BLACK, WHITE, RED, GREEN


class TestResources(unittest.TestCase):
    """Tests for file helpers."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_write_read(self):
        path = self.tmp / "drawing.txt"
        write_file(path, "ab\ncd")
        assert read_file(path) == "ab\ncd\n"

    def test_write_replaces_content(self):
        path = self.tmp / "drawing.txt"
        write_file(path, "long content")
        write_file(path, "x")
        assert read_file(path) == "x\n"

    def test_crlf_normalized(self):
        path = self.tmp / "drawing.txt"
        path.write_bytes(b"ab\r\ncd\r\n")
        assert read_file(path) == "ab\ncd\n"

    def test_read_missing(self):
        with self.assertRaises(FileNotFoundError):
            read_file(self.tmp / "missing.txt")

    def test_write_into_missing_directory(self):
        with self.assertRaises(OSError):
            write_file(self.tmp / "no" / "such" / "dir.txt", "x")

    def test_load_text_sprite_default_size(self):
        path = self.tmp / "drawing.txt"
        write_file(path, " r\nrg")
        sprite = load_text_sprite(path, mode=1)

        assert sprite.size == (2, 2)
        assert sprite.pixels == [[BLACK, RED], [RED, GREEN]]

    def test_load_text_sprite_explicit_size(self):
        path = self.tmp / "drawing.txt"
        write_file(path, "xxx\nxxx\nxxx")
        sprite = load_text_sprite(path, width=2, height=1)

        assert sprite.size == (2, 1)
        assert sprite.get_colors() == {WHITE: 2}


class TestCLI(unittest.TestCase):
    """Tests for the spritegrid command."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.drawing = self.tmp / "drawing.txt"
        write_file(self.drawing, "ab\n  ")

    def tearDown(self):
        self._tmp.cleanup()

    def run_main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_format_census(self):
        text = format_census({WHITE: 1, BLACK: 3})
        assert text == "#000000ff  3\n#ffffffff  1\n"

    def test_stats(self):
        code, out, _ = self.run_main([str(self.drawing), "--stats"])
        assert code == 0
        assert "#000000ff  2" in out
        assert "#ffffffff  2" in out

    def test_report(self):
        report = self.tmp / "report.txt"
        code, _, _ = self.run_main([str(self.drawing), "--report", str(report)])
        assert code == 0
        assert read_file(report) == "#000000ff  2\n#ffffffff  2\n"

    def test_missing_input(self):
        code, _, err = self.run_main([str(self.tmp / "missing.txt")])
        assert code == 1
        assert "Input file not found" in err

    def test_export_png(self):
        output = self.tmp / "out.png"
        code, _, _ = self.run_main([str(self.drawing), "-o", str(output)])
        assert code == 0
        with Image.open(output) as img:
            assert img.size == (2, 2)
            assert img.convert("RGBA").getpixel((0, 1)) == (0, 0, 0, 255)

    def test_board(self):
        output = self.tmp / "board.png"
        code, _, _ = self.run_main([
            str(self.drawing), "--board", "4", "4", "--offset", "1", "1",
            "-o", str(output),
        ])
        assert code == 0
        with Image.open(output) as img:
            img = img.convert("RGBA")
            assert img.size == (4, 4)
            assert img.getpixel((1, 1)) == (255, 255, 255, 255)
            assert img.getpixel((0, 0)) == (0, 0, 0, 0)

    def test_image_input(self):
        image_path = self.tmp / "sprite.png"
        Image.new("RGBA", (3, 2), (255, 0, 0, 255)).save(image_path)
        code, out, _ = self.run_main([str(image_path), "--stats"])
        assert code == 0
        assert "#ff0000ff  6" in out

    def test_invalid_image_reports_error(self):
        bogus = self.tmp / "bogus.png"
        bogus.write_text("not an image")
        code, _, err = self.run_main([str(bogus)])
        assert code == 1
        assert err.startswith("Error:")


if __name__ == "__main__":
    unittest.main(verbosity=2)
