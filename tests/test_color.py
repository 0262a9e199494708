import pytest

from tui_color import (
    AdaptiveColor,
    HexColor,
    IndexedColor,
    InvalidColorError,
    NamedColor,
    adaptive,
    as_color,
    parse_color,
    resolve,
)


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("#FF0000", HexColor(255, 0, 0)),
        ("#00ff7f", HexColor(0, 255, 127)),
        ("#000000", HexColor(0, 0, 0)),
        ("red", NamedColor("red")),
        ("BLUE", NamedColor("blue")),
        ("bright-cyan", NamedColor("bright-cyan")),
        ("bright_magenta", NamedColor("bright-magenta")),
        ("gray", NamedColor("bright-black")),
        ("grey", NamedColor("bright-black")),
        ("0", IndexedColor(0)),
        ("214", IndexedColor(214)),
        ("255", IndexedColor(255)),
    ],
)
def test_parse_valid(spec: str, expected) -> None:
    assert parse_color(spec) == expected


@pytest.mark.parametrize(
    "spec",
    [
        "",
        "#",
        "#F00",
        "#FF00000",
        "#GGGGGG",
        "FF0000",
        "256",
        "-1",
        "1.5",
        "purple",
        " red",
        "bright-",
    ],
)
def test_parse_invalid(spec: str) -> None:
    with pytest.raises(InvalidColorError) as excinfo:
        parse_color(spec)
    assert excinfo.value.spec == spec


def test_invalid_color_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_color("nope")


def test_all_sixteen_names_parse() -> None:
    base = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]
    names = base + ["bright-" + name for name in base]
    codes = [parse_color(name).code for name in names]
    assert codes == list(range(16))


def test_hex_property_round_trips_case() -> None:
    assert parse_color("#abcdef").hex == "#ABCDEF"


@pytest.mark.parametrize(
    "factory",
    [
        lambda: HexColor(256, 0, 0),
        lambda: HexColor(0, -1, 0),
        lambda: IndexedColor(300),
        lambda: NamedColor("orange"),
    ],
)
def test_direct_construction_validates(factory) -> None:
    with pytest.raises(InvalidColorError):
        factory()


def test_adaptive_resolution() -> None:
    color = adaptive("#111111", "bright-white")
    assert isinstance(color, AdaptiveColor)
    assert resolve(color, dark=True) == NamedColor("bright-white")
    assert resolve(color, dark=False) == HexColor(0x11, 0x11, 0x11)


def test_resolve_passes_concrete_colors_through() -> None:
    red = parse_color("red")
    assert resolve(red, dark=True) is red
    assert resolve(red, dark=False) is red


def test_adaptive_rejects_nesting() -> None:
    inner = adaptive("red", "blue")
    with pytest.raises(InvalidColorError):
        AdaptiveColor(inner, NamedColor("red"))


def test_adaptive_rejects_invalid_member() -> None:
    with pytest.raises(InvalidColorError):
        adaptive("red", "#12")


def test_as_color_accepts_both_forms() -> None:
    red = NamedColor("red")
    assert as_color(red) is red
    assert as_color("red") == red


def test_colors_are_hashable_and_frozen() -> None:
    color = parse_color("#102030")
    assert {color: 1}[HexColor(16, 32, 48)] == 1
    with pytest.raises(AttributeError):
        color.r = 0


@pytest.mark.parametrize(
    "factory",
    [
        lambda: HexColor(True, 0, 0),
        lambda: HexColor(0, 0, False),
        lambda: IndexedColor(True),
    ],
)
def test_bool_is_not_a_channel(factory) -> None:
    with pytest.raises(InvalidColorError):
        factory()
