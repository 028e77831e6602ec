import pytest

def pytest_addoption(parser):
    parser.addoption("--quick", action="store_true",
                     default=False, help="skip slow (randomized) tests")
    parser.addoption("--slow", action="store_true",
                     default=False, help="only run slow (randomized) tests")


def pytest_collection_modifyitems(config, items):
    quick = config.getoption("--quick")
    slow = config.getoption("--slow")
    if quick and slow:
        raise pytest.UsageError("--quick and --slow are mutually exclusive")
    if not slow:
        return
    skip_quick = pytest.mark.skip(reason="skipping all tests that are not slow")
    for item in items:
        if 'slow' not in item.fixturenames:
            item.add_marker(skip_quick)
