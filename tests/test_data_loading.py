from textwrap import dedent

import pytest

from whip.schedule_api import ExpanderOutOfRange, Frequency, ScheduleError
from whip.utils.data_loading import build_task_groups, load_schedule


def _write(tmp_path, text):
    path = tmp_path / "schedule.yaml"
    path.write_text(dedent(text), encoding="utf-8")
    return str(path)


def test_load_sample_schedule(schedule_file):
    groups = load_schedule(str(schedule_file))
    assert [g.name for g in groups] == ["Health", "Home"]
    assert groups[0].task_names() == ["Stretch", "Long run"]
    run = groups[0].tasks[1]
    assert run.rule.frequency is Frequency.weekly
    assert run.when == "weekly sat"


def test_missing_input():
    with pytest.raises(ScheduleError, match="Missing input"):
        load_schedule(None)


def test_nonexistent_input(tmp_path):
    with pytest.raises(ScheduleError, match="Non-existent input file"):
        load_schedule(str(tmp_path / "nope.yaml"))


def test_invalid_yaml(tmp_path):
    path = _write(tmp_path, "- name: [oops\n")
    with pytest.raises(ScheduleError, match="Could not parse YAML"):
        load_schedule(path)


def test_task_without_when(tmp_path):
    path = _write(tmp_path, """\
        - name: Health
          subs:
            - name: Stretch
        """)
    with pytest.raises(ScheduleError, match="Invalid schedule"):
        load_schedule(path)


def test_blank_when(tmp_path):
    path = _write(tmp_path, """\
        - name: Health
          subs:
            - name: Stretch
              when: "  "
        """)
    with pytest.raises(ScheduleError):
        load_schedule(path)


def test_top_level_must_be_a_list():
    with pytest.raises(ScheduleError):
        build_task_groups({"name": "Health"})


def test_bad_rule_aborts_load(tmp_path):
    path = _write(tmp_path, """\
        - name: Health
          subs:
            - name: Stretch
              when: daily 3/2
        """)
    with pytest.raises(ExpanderOutOfRange):
        load_schedule(path)


def test_empty_or_missing_subs():
    groups = build_task_groups([{"name": "A", "subs": None}, {"name": "B"}])
    assert [g.tasks for g in groups] == [[], []]


def test_numeric_names_become_strings():
    groups = build_task_groups([{"name": 2024, "subs": [{"name": 42, "when": "daily"}]}])
    assert groups[0].name == "2024"
    assert groups[0].task_names() == ["42"]


def test_extra_fields_are_allowed():
    groups = build_task_groups([{"name": "A", "icon": "*", "subs": [{"name": "t", "when": "daily", "note": "x"}]}])
    assert groups[0].task_names() == ["t"]


def test_empty_file_is_empty_schedule(tmp_path):
    assert load_schedule(_write(tmp_path, "")) == []
