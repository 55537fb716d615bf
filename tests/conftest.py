import pytest
from loguru import logger

from gridroute import GridWorld


@pytest.fixture(autouse=True)
def _drop_log_sinks():
    yield
    logger.remove()


@pytest.fixture
def open3():
    return GridWorld.from_strings([
        "S..",
        "...",
        "..E",
    ])


@pytest.fixture
def enclosed():
    # END sits behind a wall line; six cells are reachable from START
    return GridWorld.from_strings([
        "S..#..",
        "...#.E",
        "####..",
    ])
