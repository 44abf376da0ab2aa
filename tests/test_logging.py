import logging

from unl2csv.core.logging import setup_logging


def _file_handlers(logger):
    return [handler for handler in logger.handlers if isinstance(handler, logging.FileHandler)]


def test_each_run_gets_its_own_log_file(tmp_path):
    first = setup_logging(tmp_path, "run-a")
    first.info("first run")
    second = setup_logging(tmp_path, "run-b")
    second.info("second run")
    for handler in second.handlers:
        handler.flush()

    assert sorted(path.name for path in tmp_path.glob("run_*.log")) == ["run_run-a.log", "run_run-b.log"]
    assert "second run" in (tmp_path / "run_run-b.log").read_text(encoding="utf-8")
    assert "second run" not in (tmp_path / "run_run-a.log").read_text(encoding="utf-8")
    assert len(_file_handlers(second)) == 1


def test_repeated_setup_for_same_run_keeps_one_handler_each(tmp_path):
    setup_logging(tmp_path, "run-c")
    logger = setup_logging(tmp_path, "run-c")
    assert len(_file_handlers(logger)) == 1
    streams = [handler for handler in logger.handlers if type(handler) is logging.StreamHandler]
    assert len(streams) == 1


def test_log_dir_is_created(tmp_path):
    setup_logging(tmp_path / "nested" / "logs", "run-d")
    assert (tmp_path / "nested" / "logs" / "run_run-d.log").exists()
