import pytest

from tui_config import ToolkitConfig, reload_config


@pytest.fixture
def restore_config():
    """Put the default configuration back after a test reloads it."""
    yield
    reload_config(ToolkitConfig())
