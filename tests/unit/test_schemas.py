"""Tests for input schemas, including property-based checks with hypothesis."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from src.taskboard.schemas.pagination import count_pages, page_offset
from src.taskboard.schemas.project import ProjectCreate, ProjectUpdate
from src.taskboard.schemas.task import TaskFilters, TaskUpdate
from src.taskboard.schemas.user import UserCreate

pytestmark = pytest.mark.unit


valid_color = st.from_regex(r"^#[0-9A-Fa-f]{6}$", fullmatch=True)


@given(color=valid_color)
@settings(max_examples=100)
def test_valid_colors_accepted(color: str):
    assert ProjectCreate(name="P", color=color).color == color


@given(color=st.text(max_size=10).filter(lambda s: not (len(s) == 7 and s.startswith("#"))))
def test_malformed_colors_rejected(color: str):
    with pytest.raises(ValidationError) as exc_info:
        ProjectCreate(name="P", color=color)
    assert any(error["loc"] == ("color",) for error in exc_info.value.errors())


@given(name=st.text(alphabet=" \t\n", min_size=1, max_size=20))
def test_whitespace_project_names_rejected(name: str):
    with pytest.raises(ValidationError):
        ProjectCreate(name=name)


def test_negative_depth_rejected():
    with pytest.raises(ValidationError):
        ProjectCreate(name="P", depth=-1)


class TestPartialUpdates:
    def test_project_update_keeps_only_present_fields(self):
        assert ProjectUpdate(name="N").changes() == {"name": "N"}

    def test_project_update_keeps_explicit_null_parent(self):
        update = ProjectUpdate.model_validate({"parent_project_id": None, "name": None})
        assert update.changes() == {"parent_project_id": None}

    def test_task_update_status_is_plain_value(self):
        assert TaskUpdate(status="completed").changes() == {"status": "completed"}

    def test_task_update_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            TaskUpdate(status="archived")

    def test_aware_due_date_normalized_to_naive_utc(self):
        due = datetime(2026, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert TaskUpdate(due_date=due).due_date == datetime(2026, 1, 1, 10, 0)


class TestTaskFilters:
    def test_blank_search_dropped(self):
        assert TaskFilters(search="   ").search is None

    def test_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            TaskFilters(page=0)

    def test_without_window_keeps_predicate(self):
        filters = TaskFilters(project_id=3, search="x", page=2, limit=10, include_deleted=True)
        counted = filters.without_window()

        assert counted.page is None
        assert counted.limit is None
        assert counted.model_dump(exclude={"page", "limit"}) == filters.model_dump(
            exclude={"page", "limit"}
        )

    def test_due_before_aware_value_normalized(self):
        due = datetime(2026, 5, 1, tzinfo=UTC)
        assert TaskFilters(due_before=due).due_before == datetime(2026, 5, 1)


class TestUserCreate:
    def test_email_case_preserved(self):
        assert UserCreate(email="Mixed@Example.com", display_name="M").email == "Mixed@Example.com"

    @pytest.mark.parametrize("email", ["no-at-sign", "a@b", "two@@x.io", "sp ace@x.io"])
    def test_malformed_email_rejected(self, email: str):
        with pytest.raises(ValidationError):
            UserCreate(email=email, display_name="M")


@given(
    total=st.integers(min_value=0, max_value=10_000),
    limit=st.integers(min_value=1, max_value=500),
)
def test_pages_cover_total(total: int, limit: int):
    """Offsets of every page tile [0, total) without gaps or overlap."""
    pages = count_pages(total, limit)
    offsets = [page_offset(page, limit) for page in range(1, pages + 1)]

    assert offsets[0] == 0
    assert all(b - a == limit for a, b in zip(offsets, offsets[1:], strict=False))
    assert offsets[-1] < max(total, 1)
    assert offsets[-1] + limit >= total


def test_unbounded_listing_is_one_page():
    assert count_pages(250, None) == 1
    assert page_offset(None, 20) == 0
