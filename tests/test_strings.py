"""Tests for string helpers."""
from __future__ import annotations

from unittest.mock import patch

from server_helpers.utils.strings import (
    generate_next_name_and_slug,
    get_max_copy_number,
    is_plural,
    lowercase_string,
    sanitize_input,
    truncate_and_replace,
)

NOW_MS = 1714564800000


def test_sanitize_input_escapes_markup():
    assert sanitize_input("<script>alert(1)</script>") == "&lt;script&gt;alert(1)&lt;/script&gt;"
    assert sanitize_input('<b class="x">hi</b>') == '&lt;b class="x"&gt;hi&lt;/b&gt;'


def test_sanitize_input_keeps_plain_text_and_entities():
    assert sanitize_input("Sales & Marketing") == "Sales &amp; Marketing"
    assert sanitize_input("Sales &amp; Marketing") == "Sales &amp; Marketing"
    assert sanitize_input("plain") == "plain"


def test_lowercase_string():
    assert lowercase_string("  Mixed@Example.COM ") == "mixed@example.com"
    assert lowercase_string(None) is None


def test_is_plural():
    assert is_plural(["a", "b"]) == "s"
    assert is_plural(["a"]) == ""
    assert is_plural([]) == ""
    assert is_plural(None) == ""


def test_generate_next_name_and_slug():
    with patch("server_helpers.utils.strings._now_ms", return_value=NOW_MS):
        result = generate_next_name_and_slug("My  App")

    assert result == {"name": f"My  App {NOW_MS}", "slug": f"my-app-{NOW_MS}"}


def test_truncate_and_replace_short_name_appends_timestamp():
    with patch("server_helpers.utils.strings._now_ms", return_value=NOW_MS):
        assert truncate_and_replace("workspace") == f"workspace{NOW_MS}"


def test_truncate_and_replace_long_name_swaps_window():
    name = "a" * 35 + "b" * 15 + "tail"
    with patch("server_helpers.utils.strings._now_ms", return_value=NOW_MS):
        result = truncate_and_replace(name)

    assert result == "a" * 35 + str(NOW_MS) + "tail"


def test_get_max_copy_number():
    assert get_max_copy_number([]) == ""
    assert get_max_copy_number(["app"]) == 1
    assert get_max_copy_number(["app", "app_1", "app_4", "app_2"]) == 5
    assert get_max_copy_number(["app_3rd", "app_x"]) == 4
    assert get_max_copy_number(["app-2", "app-7"], split_char="-") == 8
