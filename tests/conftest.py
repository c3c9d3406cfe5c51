import logging
from contextlib import contextmanager

import pytest

from refspec import Operation
from refspec import RefSpec
from refspec import RefSpecRef


def pytest_make_parametrize_id(config, val, argname):
    if isinstance(val, (RefSpec, RefSpecRef, Operation)):
        return str(val) or "''"
    if isinstance(val, type) and issubclass(val, Exception):
        return val.__name__


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Never read the config file of the user running the tests"""
    path = tmp_path / "config.yaml"
    monkeypatch.setenv("REFSPEC_CONFIG", str(path))
    monkeypatch.delenv("REFSPEC_DEBUG", raising=False)
    return path


@pytest.fixture(autouse=True)
def reset_logger():
    # the cli disables propagation, which hides records from caplog
    logger = logging.getLogger("refspec")
    level, propagate = logger.level, logger.propagate
    yield
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture(autouse=True)
def assertion_msg():
    @contextmanager
    def assertion_msg(msg: str):
        try:
            yield
        except AssertionError as e:
            e.args = (e.args[0] + "\n" + msg,)
            raise

    return assertion_msg
