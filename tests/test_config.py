import pytest

from tui_border import BORDERS
from tui_config import (
    BORDER_NAMES,
    ConfigurationManager,
    RenderConfig,
    ToolkitConfig,
    get_config,
    get_render_config,
    register_config_callback,
    reload_config,
    unregister_config_callback,
)
from tui_style import Style


def test_defaults() -> None:
    config = ToolkitConfig()
    assert config.render.truncation_tail == "..."
    assert config.render.default_border == "normal"
    assert config.debug_mode is False
    assert config.log_level == "WARNING"
    assert config.validate()


def test_border_names_match_presets() -> None:
    assert set(BORDER_NAMES) == set(BORDERS)


@pytest.mark.parametrize(
    "config",
    [
        ToolkitConfig(render=RenderConfig(truncation_tail="a\nb")),
        ToolkitConfig(render=RenderConfig(truncation_tail="\x1b[1m")),
        ToolkitConfig(render=RenderConfig(default_border="")),
        ToolkitConfig(render=RenderConfig(default_border="wavy")),
        ToolkitConfig(log_level="LOUD"),
    ],
)
def test_validate_rejects(config: ToolkitConfig) -> None:
    with pytest.raises(ValueError):
        config.validate()


def test_border_name_spellings_validate() -> None:
    assert RenderConfig(default_border="Outer_Half_Block").validate()


def test_failed_reload_keeps_previous(restore_config) -> None:
    before = get_config()
    assert reload_config(ToolkitConfig(render=RenderConfig(default_border="wavy"))) is False
    assert get_config() is before


def test_environment_overrides(monkeypatch, restore_config) -> None:
    monkeypatch.setenv("TUI_TRUNCATE_TAIL", "~")
    monkeypatch.setenv("TUI_DEFAULT_BORDER", "ROUNDED")
    monkeypatch.setenv("TUI_LOG_LEVEL", "info")
    monkeypatch.setenv("TUI_DEBUG", "1")

    assert reload_config()
    assert get_render_config().truncation_tail == "~"
    assert get_render_config().default_border == "rounded"
    assert get_config().log_level == "INFO"
    assert get_config().debug_mode is True


@pytest.mark.parametrize(
    "name, value",
    [
        ("TUI_DEFAULT_BORDER", "wavy"),
        ("TUI_TRUNCATE_TAIL", "\n"),
        ("TUI_LOG_LEVEL", "LOUD"),
    ],
)
def test_bad_environment_rejected_on_reload(monkeypatch, restore_config, name: str, value: str) -> None:
    before = get_config()
    monkeypatch.setenv(name, value)
    assert reload_config() is False
    assert get_config() is before


@pytest.mark.parametrize(
    "name, value",
    [
        ("TUI_DEFAULT_BORDER", "wavy"),
        ("TUI_TRUNCATE_TAIL", "\n"),
    ],
)
def test_bad_environment_falls_back_at_startup(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    assert ConfigurationManager._load_initial_config() == ToolkitConfig()


def test_good_environment_used_at_startup(monkeypatch) -> None:
    monkeypatch.setenv("TUI_DEFAULT_BORDER", "double")
    assert ConfigurationManager._load_initial_config().render.default_border == "double"


def test_default_border_from_config(restore_config) -> None:
    assert reload_config(ToolkitConfig(render=RenderConfig(default_border="ascii")))
    assert Style().border().render("x") == "+-+\n|x|\n+-+"


def test_callbacks(restore_config) -> None:
    seen = []

    def on_change(old, new):
        seen.append((old, new))

    register_config_callback(on_change)
    try:
        new = ToolkitConfig(debug_mode=True)
        assert reload_config(new)
        assert len(seen) == 1
        assert seen[0][1] is new
    finally:
        unregister_config_callback(on_change)

    reload_config(ToolkitConfig())
    assert len(seen) == 1


def test_failing_callback_does_not_block_reload(restore_config) -> None:
    def broken(old, new):
        raise RuntimeError("boom")

    register_config_callback(broken)
    try:
        assert reload_config(ToolkitConfig(log_level="INFO"))
        assert get_config().log_level == "INFO"
    finally:
        unregister_config_callback(broken)
