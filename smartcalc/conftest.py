import pytest

from smartcalc.config import Settings
from smartcalc.environment import Environment
from smartcalc.repl import Calculator


@pytest.fixture
def env():
    return Environment({'a': 4, 'b': 5, 'count': 10})


@pytest.fixture
def calc(tmp_path):
    settings = Settings(history_file=str(tmp_path / "history"), history_enabled=False)
    return Calculator(settings)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
