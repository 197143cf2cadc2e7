"""End-to-end CLI and logging setup tests."""

import logging

from PIL import Image

from spheretracer.logging_config import setup_logging
from spheretracer.main import main, parse_args

TINY = ["--width", "16", "--samples", "1", "--max-depth", "2", "--workers", "1",
        "--chunks", "3", "--seed", "7", "--log-level", "WARNING"]


def test_parse_args_defaults():
    args = parse_args([])
    assert args.scene == "materials"
    assert args.quality == "final"
    assert args.width == 400
    assert args.chunks == 10
    assert args.output == "image/image.ppm"
    assert args.samples is None


def test_render_to_file(tmp_path):
    out = tmp_path / "image" / "image.ppm"
    assert main(TINY + ["--output", str(out)]) == 0
    with Image.open(out) as im:
        assert im.size == (16, 9)


def test_render_to_stdout(capsys):
    assert main(TINY + ["--scene", "basic", "--output", "-"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["P3", "16 9", "255"]
    assert len(lines) == 3 + 16 * 9


def test_same_seed_same_file(tmp_path):
    a = tmp_path / "a.ppm"
    b = tmp_path / "b.ppm"
    assert main(TINY + ["--scene", "random", "--output", str(a)]) == 0
    assert main(TINY + ["--scene", "random", "--output", str(b)]) == 0
    assert a.read_text() == b.read_text()


def test_invalid_settings_fail(tmp_path):
    out = tmp_path / "never.ppm"
    assert main(["--width", "0", "--output", str(out)]) == 1
    assert not out.exists()


class TestLogging:

    def test_setup_is_idempotent(self):
        logger = setup_logging(level="DEBUG")
        setup_logging(level="DEBUG")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "render.log"
        logger = setup_logging(level="INFO", log_file=log_file)
        logging.getLogger("spheretracer.test").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
        setup_logging(level="WARNING")
