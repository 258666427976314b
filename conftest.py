"""
Shared pytest fixtures.
"""

import logging

import pytest

from html_ast_utils import create_fragment
from html_ast_utils.utils.config import Config


@pytest.fixture
def config():
    """A fresh configuration with the default options."""
    return Config()


@pytest.fixture
def first_child():
    """Parse a fragment and return (fragment, first top-level node)."""
    def _parse(html):
        fragment = create_fragment(html)
        return fragment, fragment.child_nodes[0]
    return _parse


@pytest.fixture
def clean_logger():
    """Yield a logger name and strip any handlers added to it afterwards."""
    names = []

    def _name(component):
        name = f"html_ast_utils.{component}"
        names.append(name)
        return component

    yield _name

    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
