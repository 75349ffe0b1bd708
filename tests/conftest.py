import matplotlib
import pytest
import structlog

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def _reset_structlog():
    """The CLI configures structlog globally; undo it between tests."""
    yield
    structlog.reset_defaults()
