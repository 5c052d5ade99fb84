import logging

import pytest

from linfit.fitting import grid_search, minimize, ordinary_least_squares
from linfit.utils import logger as logger_module
from linfit.utils.logger import LOGGER_NAME, get_logger, log_info, setup_logger


@pytest.fixture
def unconfigured_logger(monkeypatch, tmp_path):
    """Logger state of a fresh import, with cwd in an empty directory."""
    monkeypatch.setattr(logger_module, '_logger', None)
    monkeypatch.setattr(logging.getLogger(LOGGER_NAME), 'handlers', [logging.NullHandler()])
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_library_calls_write_no_files(unconfigured_logger, small_data):
    ordinary_least_squares(small_data)
    grid_search(small_data, (0, 4), (0, 4), resolution=5)
    minimize(small_data, [0.0, 0.0])

    assert list(unconfigured_logger.iterdir()) == []
    assert logger_module._logger is None


def test_get_logger_is_bare_named_logger_before_setup(unconfigured_logger):
    logger = get_logger()
    assert logger.name == LOGGER_NAME
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)


def test_setup_logger_writes_to_log_dir(unconfigured_logger, tmp_path_factory):
    log_dir = tmp_path_factory.mktemp('app-logs')
    logger = setup_logger(log_dir=str(log_dir))
    try:
        assert get_logger() is logger
        log_info("after setup")
        for handler in logger.handlers:
            handler.flush()
        (log_file,) = log_dir.iterdir()
        assert log_file.name.startswith('linear_fitting_')
        assert "after setup" in log_file.read_text()
        assert list(unconfigured_logger.iterdir()) == []
    finally:
        for handler in list(logger.handlers):
            handler.close()
