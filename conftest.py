"""Pytest configuration for pfreporter."""

# Prevent collection from source tree
collect_ignore = ["src"]


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no network, fast)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (require the live performance farm)"
    )
