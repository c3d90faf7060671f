import os

import pytest

from gofind.cli_logger import logger


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path, monkeypatch):
    log_dir = str(tmp_path / "logs")
    monkeypatch.setattr(logger, "log_dir", log_dir)
    monkeypatch.setattr(logger, "log_file", os.path.join(log_dir, "gofind_test.log"))
    monkeypatch.setattr(logger, "verbose", False)
    return logger
