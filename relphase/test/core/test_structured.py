from __future__ import annotations

from relphase.core.structured import (
    as_obj_list,
    as_str_dict,
    get_bool,
    get_int,
    get_raw_str,
    get_str,
    get_table,
)


def test_as_str_dict() -> None:
    assert as_str_dict({"a": 1}) == {"a": 1}
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict([]) is None


def test_as_obj_list() -> None:
    assert as_obj_list([1, "a"]) == [1, "a"]
    assert as_obj_list({}) is None


def test_getters() -> None:
    data: dict[str, object] = {
        "s": "  text ",
        "blank": "   ",
        "empty": "",
        "n": 3,
        "flag": True,
        "t": {"k": "v"},
    }
    assert get_str(data, "s") == "text"
    assert get_str(data, "blank") is None
    assert get_int(data, "n") == 3
    assert get_int(data, "flag") is None
    assert get_bool(data, "flag") is True
    assert get_bool(data, "n") is None
    assert get_table(data, "t") == {"k": "v"}
    assert get_str(data, "missing") is None


def test_get_raw_str_keeps_value_verbatim() -> None:
    data: dict[str, object] = {"s": "  text ", "empty": "", "n": 3}
    assert get_raw_str(data, "s") == "  text "
    assert get_raw_str(data, "empty") == ""
    assert get_raw_str(data, "n") is None
    assert get_raw_str(data, "missing") is None
