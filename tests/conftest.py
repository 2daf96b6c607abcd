import pytest
import random


def pytest_addoption(parser):
    parser.addoption("--all", action="store_true", help="run all source and bound combinations")


def generate_sources(sizes):
    rand = random.Random(1234)
    sources = []
    for size in sizes:
        sources.append(list(range(size)))
        sources.append([rand.randint(-50, 50) for _ in range(size)])
    return sources


def pytest_generate_tests(metafunc):
    if metafunc.config.getoption("all"):
        sizes = [0, 1, 2, 5, 10, 100, 1000]
        bounds = [0, 1, 2, 3, 5, 10, 99, 100, 101, 5000]
    else:
        sizes = [0, 1, 7, 50]
        bounds = [0, 1, 5, 50, 60]
    if "xs" in metafunc.fixturenames:
        metafunc.parametrize("xs", generate_sources(sizes))
    if "n" in metafunc.fixturenames:
        metafunc.parametrize("n", bounds)


@pytest.fixture
def calls():
    """Counter shared by the counted() helpers of a single test."""
    return {}


def counted(fn, calls):
    name = fn.__name__
    calls.setdefault(name, 0)
    def counting(*args):
        calls[name] += 1
        return fn(*args)
    counting.__name__ = name
    return counting
