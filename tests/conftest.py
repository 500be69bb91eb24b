import datetime

import pytest

from sudokugen.common.peers import PeerIndex


# Keep each phase's report on the item so fixtures can read the outcome
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


# Print start, end and duration of every test; generation tests can be slow
@pytest.fixture(autouse=True)
def log_test_lifecycle(request):
    node_id = request.node.nodeid
    started = datetime.datetime.now()
    print(f"\n[START] {started.strftime('%H:%M:%S')} - Running: {node_id}")

    yield

    elapsed = (datetime.datetime.now() - started).total_seconds()
    report = getattr(request.node, "rep_call", None)
    status = report.outcome.upper() if report else "UNKNOWN"
    print(f"\n[END] {elapsed:.2f}s - Result: {status} - {node_id}")


@pytest.fixture
def peer_index():
    """A private peer index, so cache counters start from zero."""
    return PeerIndex()
