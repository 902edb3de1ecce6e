from __future__ import annotations

import pytest

from tagcolors.core.recorder import RecorderOption, UseTagColors
from tagcolors.core.tags import Color, Tag


def test_use_tag_colors_is_a_recorder_option() -> None:
    assert isinstance(UseTagColors({}), RecorderOption)


def test_equal_maps_make_equal_options() -> None:
    a = UseTagColors({Tag("unit"): Color.named("red")})
    b = UseTagColors({Tag("unit"): Color(255, 0, 0)})

    assert a == b
    assert hash(a) == hash(b)


def test_option_is_hashable() -> None:
    option = UseTagColors({Tag("unit"): Color.named("red"), Tag("ui"): Color(1, 2, 3)})

    assert {option, option} == {option}


def test_option_does_not_follow_callers_dict() -> None:
    colors = {Tag("unit"): Color.named("red")}
    option = UseTagColors(colors)

    colors[Tag("ui")] = Color.named("blue")

    assert option.tag_colors == {Tag("unit"): Color.named("red")}


def test_option_map_is_read_only() -> None:
    option = UseTagColors({Tag("unit"): Color.named("red")})

    with pytest.raises(TypeError):
        option.tag_colors[Tag("ui")] = Color.named("blue")  # type: ignore[index]


def test_to_dict_uses_hex_colors_sorted_by_tag() -> None:
    option = UseTagColors({Tag("ui"): Color(0, 0, 255), Tag("db"): Color(1, 2, 3)})

    assert option.to_dict() == {"use_tag_colors": {"db": "#010203", "ui": "#0000ff"}}
    assert list(option.to_dict()["use_tag_colors"]) == ["db", "ui"]


def test_base_option_is_abstract() -> None:
    with pytest.raises(TypeError):
        RecorderOption()  # type: ignore[abstract]
