import logging

import pytest
import yaml
from pathlib import Path

from errchain.core.registry import Registry


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def write_config(tmp_path):
    def _write(data: dict, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_errchain_logger():
    yield
    # setup_logger detaches the package logger from root; undo it between tests
    logger = logging.getLogger("errchain")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
