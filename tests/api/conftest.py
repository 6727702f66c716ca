"""Fixtures for the live catalog API suites."""
import pytest

from fakerest.client import ApiRequestHelper
from fakerest.config import load_config
from fakerest.steps import StepLogger


@pytest.fixture(scope="session")
def api_config():
    return load_config()


@pytest.fixture(scope="session")
def api(api_config):
    """One request helper per run; it holds no state beyond the HTTP session."""
    with ApiRequestHelper(api_config) as helper:
        yield helper


@pytest.fixture(scope="class")
def steps(request):
    name = getattr(request.cls, "TEST_CLASS_NAME", request.node.name)
    logger = StepLogger(name)
    logger.start_class()
    yield logger
    logger.end_class()


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(autouse=True)
def log_failure(request, steps):
    yield
    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        steps.failure(f"{request.node.name} failed")
