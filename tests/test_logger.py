import logging
import sys

import pytest

from logger import setup_logger


@pytest.fixture
def run_name(request):
    name = f"moonflix-{request.node.name}"
    yield name
    log = logging.getLogger(name)
    for handler in list(log.handlers):
        handler.close()
        log.removeHandler(handler)


def test_file_and_stdout_handlers(tmp_path, run_name):
    log = setup_logger(run_name, tmp_path / "logs", log_file="run.log")

    file_handlers = [h for h in log.handlers if isinstance(h, logging.FileHandler)]
    stream_handlers = [h for h in log.handlers if not isinstance(h, logging.FileHandler)]
    assert [h.level for h in file_handlers] == [logging.DEBUG]
    assert [h.level for h in stream_handlers] == [logging.INFO]
    assert stream_handlers[0].stream is sys.stdout

    log.debug("debug only in file")
    file_handlers[0].flush()
    assert "debug only in file" in (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")


def test_second_call_reuses_handlers(tmp_path, run_name):
    first = setup_logger(run_name, tmp_path)
    second = setup_logger(run_name, tmp_path / "other")

    assert first is second
    assert len(second.handlers) == 2
    assert not (tmp_path / "other").exists()
