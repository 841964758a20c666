import pytest

from penandpaper.display import HeadlessDisplay
from penandpaper.paper import Paper, reset_titles
from penandpaper.pen import Pen


@pytest.fixture(autouse=True)
def fresh_titles():
    reset_titles()
    yield
    reset_titles()


@pytest.fixture
def display():
    return HeadlessDisplay()


@pytest.fixture
def paper(display):
    return Paper(200, 150, display=display)


@pytest.fixture
def pen(paper):
    return Pen(paper)
