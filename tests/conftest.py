import pytest


def pytest_addoption(parser):
    parser.addoption("--num-participants", action="store", default=5, type=int,
        help="number of participants in simulated rounds %(default)s")
    parser.addoption("--threshold", action="store", default=3, type=int,
        help="threshold for simulated rounds %(default)s")


@pytest.fixture
def num_participants(request):
    return request.config.getoption("--num-participants")


@pytest.fixture
def threshold(request):
    return request.config.getoption("--threshold")
