"""Pytest configuration and fixtures."""

import os

import pytest

from restlist.controller import SelectionController
from restlist.core.models import Restaurant, RestaurantList
from restlist.operations.merge import MergeService
from restlist.registry import ListRegistry


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Isolate environment variables and config lookup for each test.

    Config files are searched in XDG_CONFIG_HOME and the working directory,
    so both point at an empty temporary directory.
    """
    original_env = os.environ.copy()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("RESTLIST_NO_COLOR", raising=False)
    monkeypatch.delenv("RESTLIST_WIDTH", raising=False)
    monkeypatch.chdir(tmp_path)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def la1():
    """First seed list: McDonald's, Starbucks."""
    return RestaurantList("La1", [Restaurant("McDonald's"), Restaurant("Starbucks")])


@pytest.fixture
def la2():
    """Second seed list: Green Dragon, Cactus."""
    return RestaurantList("La2", [Restaurant("Green Dragon"), Restaurant("Cactus")])


@pytest.fixture
def registry(la1, la2):
    """Registry holding both seed lists, nothing selected."""
    return ListRegistry([la1, la2])


@pytest.fixture
def controller(registry):
    """Selection controller attached to the registry fixture."""
    return SelectionController(registry)


@pytest.fixture
def merger(registry):
    """Merge service bound to the registry fixture."""
    return MergeService(registry)


@pytest.fixture
def views(controller):
    """List that collects every ViewState the controller publishes."""
    received = []
    controller.subscribe(received.append)
    return received
