import pytest


def pytest_addoption(parser):
    group = parser.getgroup("jpdiff", "jpdiff test selection")
    group.addoption("--quick", action="store_true", default=False,
                    help="skip tests that compare large documents")
    group.addoption("--slow", action="store_true", default=False,
                    help="only run tests that compare large documents")


def pytest_collection_modifyitems(config, items):
    quick = config.getoption("--quick")
    only_slow = config.getoption("--slow")
    if quick and only_slow:
        raise pytest.UsageError("--quick and --slow cannot be combined")
    if not (quick or only_slow):
        return
    reason = "slow test" if quick else "not a slow test"
    # Tests opt in to being slow by requesting the 'slow' fixture
    for item in items:
        if ('slow' in item.fixturenames) == quick:
            item.add_marker(pytest.mark.skip(reason=reason))
