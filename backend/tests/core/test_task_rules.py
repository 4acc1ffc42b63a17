"""Tests for task_rules — pure title normalization and stats shaping, no IO."""

import pytest

from app.core.errors import TaskValidationError
from app.core.task_rules import MAX_TITLE_LENGTH, build_stats, normalize_title


def test_normalize_title_strips_whitespace():
    assert normalize_title("  buy milk\t") == "buy milk"


def test_normalize_title_keeps_inner_whitespace():
    assert normalize_title("buy  oat milk") == "buy  oat milk"


@pytest.mark.parametrize("raw", [None, "", " ", "\n\t "])
def test_normalize_title_rejects_missing_or_blank(raw):
    with pytest.raises(TaskValidationError) as exc_info:
        normalize_title(raw)
    assert exc_info.value.message == "title required"
    assert exc_info.value.http_status == 400


def test_build_stats_coalesces_nulls():
    assert build_stats(None, None) == {"total": 0, "pending": 0, "completed": 0}


def test_build_stats_total_is_sum():
    stats = build_stats(3, 4)
    assert stats == {"total": 7, "pending": 3, "completed": 4}


def test_normalize_title_length_ignores_surrounding_whitespace():
    title = "x" * MAX_TITLE_LENGTH
    assert normalize_title(f"   {title}\n") == title


def test_normalize_title_rejects_overlong():
    with pytest.raises(TaskValidationError) as exc_info:
        normalize_title("x" * (MAX_TITLE_LENGTH + 1))
    assert exc_info.value.field == "title"
