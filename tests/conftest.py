import logging

import pytest

from capstanignore import util


def pytest_configure(config):
    config.addinivalue_line("markers", "quick: fast unit tests")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Keep the developer's shell, and earlier CLI invocations, from leaking
    into tests
    """
    for envvar in (
        "CAPSTANIGNORE_FILENAME",
        "CAPSTANIGNORE_FORCE_COLOR",
        "CAPSTANIGNORE_FORCE_NO_COLOR",
        "NO_COLOR",
    ):
        monkeypatch.delenv(envvar, raising=False)
    monkeypatch.setattr(util, "FORCE_COLOR", False)
    monkeypatch.setattr(util, "FORCE_NO_COLOR", False)

    yield

    # the CLI configures this logger for the whole process
    logger = logging.getLogger("capstanignore")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def project(tmp_path, monkeypatch):
    """
    An empty project directory that is also the working directory
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path
