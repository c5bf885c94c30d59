import pytest

from jobportal.core.exceptions import InvalidError
from jobportal.repositories import job_repository
from jobportal.schemas.common import PageResponse
from jobportal.utils.pagination import PageRequest, resolve_sort
from jobportal.utils.text_processing import clean_optional_text, clean_skills, contains_pattern, escape_like
from tests.conftest import create_job


def test_first_page_of_many():
    page = PageResponse.of(list(range(10)), page=0, size=10, total_elements=25)

    assert page.total_elements == 25
    assert page.total_pages == 3
    assert page.last is False


def test_last_page():
    page = PageResponse.of(list(range(5)), page=2, size=10, total_elements=25)

    assert page.total_pages == 3
    assert page.last is True


def test_empty_result_is_last_page():
    page = PageResponse.of([], page=0, size=10, total_elements=0)

    assert page.total_pages == 0
    assert page.last is True


def test_page_serializes_in_camel_case():
    data = PageResponse.of([], page=0, size=10, total_elements=0).model_dump(by_alias=True)
    assert set(data) == {"content", "page", "size", "totalElements", "totalPages", "last"}


def test_resolve_sort_rejects_unknown_field():
    with pytest.raises(InvalidError):
        resolve_sort(job_repository.SORT_FIELDS, PageRequest(sort_by="passwordHash"))


def test_sort_direction_is_case_insensitive():
    assert PageRequest(sort_dir="DESC").descending
    assert not PageRequest(sort_dir="asc").descending


def test_paging_over_active_jobs(db, recruiter):
    for i in range(25):
        create_job(db, recruiter, title=f"Job {i}", minutes=i)

    first, total = job_repository.find_active(db, PageRequest(page=0, size=10))
    last, _ = job_repository.find_active(db, PageRequest(page=2, size=10))

    assert total == 25
    assert len(first) == 10
    assert first[0].title == "Job 24"
    assert len(last) == 5
    assert last[-1].title == "Job 0"


def test_negative_page_is_rejected(db):
    with pytest.raises(InvalidError):
        job_repository.find_active(db, PageRequest(page=-1, size=10))


def test_escape_like_keeps_wildcards_literal():
    assert escape_like("100%") == "100\\%"
    assert escape_like("snake_case") == "snake\\_case"
    assert escape_like("a\\b") == "a\\\\b"
    assert contains_pattern("go") == "%go%"


def test_clean_helpers():
    assert clean_optional_text("  ") is None
    assert clean_optional_text(" Berlin ") == "Berlin"
    assert clean_skills([" go ", "", "  ", "k8s"]) == ["go", "k8s"]
    assert clean_skills(None) == []
