import pytest
from pi.textfit.config import LayoutConfig, set_config


@pytest.fixture(autouse=True)
def default_layout_config():
    """Pin the process-wide layout config so environment overrides don't leak in."""
    set_config(LayoutConfig())
    yield
    set_config(None)
