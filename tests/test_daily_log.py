from datetime import date
from textwrap import dedent

import pytest

from whip.schedule_api import (
    DailyLog,
    MalformedLog,
    decode_daily_log,
    encode_daily_log,
    is_incomplete,
    read_daily_log,
)


def _decode(text: str) -> DailyLog:
    return decode_daily_log(text.splitlines(keepends=True))


def test_encode_layout():
    text = encode_daily_log({"Health": {"Stretch": ""}}, date(2024, 1, 1))
    assert text == "---\nHealth:\n  Stretch: ''\n---\n\n# Monday Notes:\n\n- "


def test_encode_empty_header():
    text = encode_daily_log({}, date(2024, 1, 6))
    assert text.startswith("---\n{}\n---\n")
    assert "# Saturday Notes:" in text
    assert _decode(text).entries == {}


def test_round_trip_preserves_values_and_order():
    header = {
        "Home": {"Water plants": "", "Pay rent": "done", "Laundry": "no"},
        "Health": {"Stretch": "yes", "Run": "5km, 27:30", "Über-stretch": "✓"},
        "Misc": {"Quote": "'single'", "Colon": "a: b", "Multi": "line one\nline two", "Fence": "a\n---\nb"},
        "a\n---\nb": {"a\n---\nb": "  ---  "},
    }
    decoded = _decode(encode_daily_log(header, date(2024, 3, 15)))
    assert decoded.entries == header
    assert list(decoded.entries) == ["Home", "Health", "Misc", "a\n---\nb"]
    assert list(decoded.entries["Home"]) == ["Water plants", "Pay rent", "Laundry"]


def test_notes_are_kept_but_not_parsed():
    text = dedent(
        """\
        ---
        Health:
          Stretch: done
        ---

        # Monday Notes:

        - felt great
        ---
        not: front matter
        """
    )
    daily = _decode(text)
    assert daily.entries == {"Health": {"Stretch": "done"}}
    assert "- felt great" in daily.notes
    assert "not: front matter" in daily.notes


def test_lines_before_front_matter_are_ignored():
    daily = _decode("# title\n\n---\nA:\n  b: ''\n---\n")
    assert daily.entries == {"A": {"b": ""}}


def test_delimiter_tolerates_surrounding_whitespace():
    daily = _decode("  ---  \nA:\n  b: x\n--- \n")
    assert daily.entries == {"A": {"b": "x"}}


def test_no_front_matter_is_empty():
    daily = _decode("just some notes\n- and a bullet\n")
    assert daily.is_empty()
    assert daily.notes == ""


def test_empty_front_matter():
    assert _decode("---\n---\n").entries == {}


def test_group_without_tasks():
    daily = _decode("---\nHealth:\nHome:\n  Rent: ''\n---\n")
    assert daily.entries == {"Health": {}, "Home": {"Rent": ""}}


def test_yaml_scalars_are_kept_as_loaded():
    daily = _decode("---\nHealth:\n  Run: no\n  Stretch: 3\n---\n")
    assert daily.get("Health", "Run") is False
    assert daily.get("Health", "Stretch") == 3
    assert daily.get("Health", "Missing") == ""
    assert daily.get("Nope", "Missing", None) is None


@pytest.mark.parametrize(
    "text",
    [
        "---\nHealth: [unclosed\n---\n",
        "---\n- a\n- b\n---\n",
        "---\nplain string\n---\n",
        "---\nHealth: done\n---\n",
        "---\nHealth:\n  Run: ''\n",
    ],
)
def test_malformed_front_matter(text):
    with pytest.raises(MalformedLog):
        _decode(text)


def test_read_missing_file_is_empty(tmp_path):
    assert read_daily_log(tmp_path / "nope.md") == DailyLog()


def test_read_file(tmp_path):
    path = tmp_path / "2024-01-01.md"
    path.write_text(encode_daily_log({"A": {"b": "done"}}, date(2024, 1, 1)), encoding="utf-8")
    daily = read_daily_log(path)
    assert daily.entries == {"A": {"b": "done"}}
    assert daily.notes.strip().startswith("# Monday Notes:")


def test_read_corrupt_file_names_it(tmp_path):
    path = tmp_path / "broken.md"
    path.write_text("---\nA: [\n---\n", encoding="utf-8")
    with pytest.raises(MalformedLog, match="broken.md"):
        read_daily_log(path)


@pytest.mark.parametrize("value", ["", None, False, 0, "no", " No ", "false", "FALSE", "off"])
def test_incomplete_values(value):
    assert is_incomplete(value)


@pytest.mark.parametrize("value", ["done", "yes", "x", True, 1, "5km"])
def test_complete_values(value):
    assert not is_incomplete(value)


def test_multiline_strings_stay_inside_front_matter():
    text = encode_daily_log({"G": {"T": "a\n---\nb"}}, date(2024, 1, 1))
    block = text.split("\n---\n", 1)[0].splitlines()[1:]
    assert all(line.strip() != "---" for line in block)
    assert _decode(text).entries == {"G": {"T": "a\n---\nb"}}
