"""Pytest configuration shared by the linkgraph test suite."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: repeated stress runs, excluded by run_tests.py unless --all"
    )
