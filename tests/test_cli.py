import logging

import pytest

from forcegraph.__main__ import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert not args.headless
    assert args.ticks == 600
    assert args.log_level == "INFO"
    assert args.log_file is None


def test_headless_run(tmp_path):
    log_file = tmp_path / "run.log"
    code = main(["--headless", "--ticks", "5", "--log-level", "DEBUG", "--log-file", str(log_file)])

    assert code == 0
    text = log_file.read_text(encoding="utf-8")
    assert "Layout relaxed" in text
    assert "Registered node" in text

    logger = logging.getLogger("forcegraph")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_negative_ticks_rejected():
    with pytest.raises(SystemExit):
        main(["--headless", "--ticks", "-3"])
