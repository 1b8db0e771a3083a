"""Tests for the task model and line codec."""

from datetime import date

import pytest

from todotxt_cli import date as dates
from todotxt_cli.exceptions import InvalidPriority
from todotxt_cli.priority import Priority
from todotxt_cli.task import Task, decode_task, encode_task
from todotxt_cli.token import Token, TokenType


class TestDecode:
    """Test decoding raw lines."""

    def test_open_task_with_priority_and_date(self):
        task = decode_task("(A) 2024-03-01 Buy milk +errands @store")

        assert task.completed is False
        assert task.priority == Priority("A")
        assert task.creation_date == date(2024, 3, 1)
        assert task.completion_date is None
        assert task.description == [
            Token(TokenType.WORD, "Buy"),
            Token(TokenType.WORD, "milk"),
            Token(TokenType.PROJECT_TAG, "errands"),
            Token(TokenType.CONTEXT_TAG, "store"),
        ]

    def test_completed_task_with_two_dates(self):
        task = decode_task("x 2024-03-02 2024-03-01 Buy milk")

        assert task.completed is True
        assert task.completion_date == date(2024, 3, 2)
        assert task.creation_date == date(2024, 3, 1)
        assert task.description_text == "Buy milk"

    def test_completed_task_with_one_date(self):
        task = decode_task("x 2024-03-02 Buy milk")

        assert task.completion_date == date(2024, 3, 2)
        assert task.creation_date is None

    def test_plain_description(self):
        task = decode_task("Buy milk")

        assert task.completed is False
        assert task.priority is Priority.NONE
        assert task.creation_date is None
        assert task.description_text == "Buy milk"

    def test_open_task_second_date_is_consumed(self):
        task = decode_task("2024-03-01 2024-03-05 Call mom")

        assert task.creation_date == date(2024, 3, 1)
        assert task.completion_date is None
        assert task.description_text == "Call mom"

    def test_priority_must_be_at_line_start(self):
        task = decode_task("Call (A) mom")

        assert task.priority is Priority.NONE
        assert task.description_text == "Call (A) mom"

    def test_lowercase_priority_is_description(self):
        task = decode_task("(a) Call mom")

        assert task.priority is Priority.NONE
        assert task.description_text == "(a) Call mom"

    def test_priority_requires_trailing_space(self):
        task = decode_task("(A)Call mom")

        assert task.priority is Priority.NONE

    def test_completion_marker_requires_space(self):
        task = decode_task("xylophone lesson")

        assert task.completed is False
        assert task.description_text == "xylophone lesson"

    def test_invalid_date_is_consumed_as_absent(self):
        task = decode_task("2024-13-45 Fix calendar")

        assert task.creation_date is None
        assert task.description_text == "Fix calendar"

    def test_two_digit_year_is_consumed_as_absent(self):
        task = decode_task("24-03-01 Short year")

        assert task.creation_date is None
        assert task.description_text == "Short year"

    def test_date_after_description_start_is_a_word(self):
        task = decode_task("Pay rent 2024-03-01")

        assert task.creation_date is None
        assert task.description[-1] == Token(TokenType.WORD, "2024-03-01")

    def test_completed_with_priority_keeps_priority(self):
        task = decode_task("x (B) 2024-03-02 Done")

        assert task.completed is True
        assert task.priority == Priority("B")
        assert task.completion_date == date(2024, 3, 2)

    def test_strict_decode_validates(self):
        task = decode_task("(Z) Last", strict=True)

        assert task.priority == Priority("Z")

    def test_tag_views(self):
        task = decode_task("Ship it +release @work due:2024-04-01 +docs")

        assert task.projects == ["release", "docs"]
        assert task.contexts == ["work"]
        assert task.tags == {"due": "2024-04-01"}


class TestEncode:
    """Test encoding tasks back to lines."""

    @pytest.mark.parametrize("line", [
        "(A) 2024-03-01 Buy milk +errands @store",
        "x 2024-03-02 2024-03-01 Buy milk",
        "x 2024-03-02 Buy milk pri:A",
        "(C) Call mom @phone due:2024-04-01",
        "Plain words only",
        "x Done without dates",
    ])
    def test_round_trip(self, line):
        assert encode_task(decode_task(line)) == line

    def test_field_order(self):
        task = Task(
            completed=True,
            priority=Priority("B"),
            completion_date=date(2024, 3, 2),
            creation_date=date(2024, 3, 1),
            description=[Token.word("Report")],
        )

        assert task.serialize() == "x (B) 2024-03-02 2024-03-01 Report"
        assert str(task) == "x (B) 2024-03-02 2024-03-01 Report"

    def test_lossy_spacing(self):
        assert encode_task(decode_task("(A) Buy   milk")) == "(A) Buy milk"

    def test_open_task_drops_completion_date(self):
        task = Task(completion_date=date(2024, 3, 2), description=[Token.word("Open")])

        assert task.serialize() == "Open"
        assert task.completion_date is None

    def test_invalid_priority_raises(self):
        task = Task(priority=Priority("1"), description=[Token.word("Bad")])

        with pytest.raises(InvalidPriority):
            encode_task(task)

    def test_validate_rejects_assigned_invalid_priority(self):
        task = decode_task("Anything")
        task.set_priority(Priority("?"))

        with pytest.raises(InvalidPriority):
            task.validate()


class TestMarkCompleted:
    """Test completing tasks."""

    def test_archives_priority(self):
        task = decode_task("(A) Buy milk")
        task.mark_completed()

        assert task.completed is True
        assert task.priority is Priority.NONE
        assert task.description[-1] == Token.key_value("pri", "A")
        assert task.serialize() == "x Buy milk pri:A"

    def test_stamps_completion_date_when_created(self, monkeypatch):
        monkeypatch.setattr(dates, "now", lambda: date(2024, 3, 2))
        task = decode_task("2024-03-01 Buy milk")
        task.mark_completed()

        assert task.completion_date == date(2024, 3, 2)
        assert task.serialize() == "x 2024-03-02 2024-03-01 Buy milk"

    def test_no_completion_date_without_creation_date(self):
        task = decode_task("Buy milk")
        task.mark_completed()

        assert task.completion_date is None
        assert task.serialize() == "x Buy milk"

    def test_is_idempotent(self, monkeypatch):
        monkeypatch.setattr(dates, "now", lambda: date(2024, 3, 2))
        task = decode_task("(B) 2024-03-01 Water plants")
        task.mark_completed()
        first = task.serialize()

        monkeypatch.setattr(dates, "now", lambda: date(2024, 3, 9))
        task.mark_completed()

        assert task.serialize() == first
        assert task.completion_date == date(2024, 3, 2)
        assert [t.key for t in task.description].count("pri") == 1


class TestEditing:
    """Test priority and description edits."""

    def test_set_and_clear_priority(self):
        task = decode_task("Call mom")
        task.set_priority(Priority("B"))
        assert task.serialize() == "(B) Call mom"

        task.clear_priority()
        assert task.serialize() == "Call mom"

    def test_append_description(self):
        task = decode_task("(A) Call mom")
        task.append_description("about +birthday")

        assert task.serialize() == "(A) Call mom about +birthday"
        assert task.projects == ["birthday"]

    def test_append_to_empty_description(self):
        task = Task()
        task.append_description("Something")

        assert task.description_text == "Something"

    def test_new_stamps_creation_date(self, monkeypatch):
        monkeypatch.setattr(dates, "now", lambda: date(2024, 5, 1))
        task = Task.new("(A) Plan trip")

        assert task.creation_date == date(2024, 5, 1)
        assert task.serialize() == "(A) 2024-05-01 Plan trip"
