"""
Shared fixtures for prettylog tests
"""

import logging

import pytest

from prettylog import logger as installation


def make_record(name="app", level=logging.INFO, msg="hello world", args=()):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def fresh_install():
    """Detach any installed handler before and after the test"""
    root = logging.getLogger()
    previous_level = root.level
    installation._reset_for_tests()
    yield
    installation._reset_for_tests()
    root.setLevel(previous_level)
