"""Unit tests for API record models."""

from datetime import datetime

import pytest

from choojobs.exceptions import ApiError
from choojobs.models import AdminStats, AnalysisResult, Application, Job, JobPage, SavedJob, User
from choojobs.utils.formatting import format_date, safe_filename


@pytest.mark.unit
def test_user_roles_and_plan():
    user = User.model_validate({"id": 3, "email": "x@example.com", "plan": "PRO", "role": "admin", "credits": None})

    assert user.id == "3"
    assert user.is_pro
    assert user.is_admin
    assert user.credits == 0
    assert user.display_name == "x"


@pytest.mark.unit
def test_user_accepts_any_backend_email():
    user = User.model_validate({"id": 9, "email": "dev@choojobs.local"})
    assert user.email == "dev@choojobs.local"
    assert user.display_name == "dev"

    assert User.model_validate({"email": None}).email == ""


@pytest.mark.unit
def test_from_api_reports_malformed_records_as_api_errors():
    with pytest.raises(ApiError):
        Job.from_api({"title": "No id"})

    with pytest.raises(ApiError):
        User.from_api(None)


@pytest.mark.unit
def test_job_and_analysis_tolerate_null_scalars():
    job = Job.from_api({"id": 1, "title": None})
    assert job.id == "1"
    assert job.title is None

    analysis = AnalysisResult.from_api({"score": None, "match_summary": None})
    assert analysis.percent == 0
    assert analysis.match_summary == ""


@pytest.mark.unit
def test_job_ignores_unknown_fields_and_parses_dates():
    job = Job.model_validate({
        "id": 42,
        "title": "Backend Engineer",
        "company": "Acme",
        "created_at": "2025-03-01T10:00:00.000Z",
        "salary_raw": "unknown field",
    })

    assert job.id == "42"
    assert job.created_at.year == 2025
    assert job.employment_label == "Full Time"
    assert not hasattr(job, "salary_raw")


@pytest.mark.unit
def test_job_page_paging():
    page = JobPage.model_validate({"jobs": None, "total": 45, "page": 2, "limit": 20})

    assert page.jobs == []
    assert page.has_previous
    assert page.has_next

    last = JobPage.model_validate({"jobs": [], "total": 45, "page": 3, "limit": 20})
    assert not last.has_next


@pytest.mark.unit
def test_job_page_without_totals_has_no_next():
    page = JobPage.model_validate({"jobs": [{"id": "a", "title": "Dev"}]})
    assert not page.has_next
    assert not page.has_previous


@pytest.mark.unit
def test_analysis_result_percent_is_clamped():
    assert AnalysisResult(score=87.6).percent == 88
    assert AnalysisResult(score=140).percent == 100
    assert AnalysisResult(score=-3).percent == 0


@pytest.mark.unit
def test_analysis_result_null_lists_and_top_three():
    result = AnalysisResult.model_validate({
        "score": 70,
        "match_summary": None,
        "strengths": ["a", "b", "c", "d"],
        "weaknesses": None,
        "recommendations": None,
    })

    assert result.match_summary == ""
    assert result.top_strengths == ["a", "b", "c"]
    assert result.weaknesses == []
    assert result.recommendations == []


@pytest.mark.unit
def test_admin_stats_coerces_string_counts():
    stats = AdminStats.model_validate({
        "users": {"total_users": "10", "pro_users": "4", "free_users": "6"},
        "analyses": {"total_analyses": "31", "avg_score": "72.5"},
        "jobs": {"total_jobs": "1200"},
    })

    assert stats.users.total_users == 10
    assert stats.analyses.avg_score == 72.5
    assert stats.pro_share == pytest.approx(40.0)
    assert stats.free_share == pytest.approx(60.0)


@pytest.mark.unit
def test_admin_stats_share_without_users_is_zero():
    stats = AdminStats.model_validate({})
    assert stats.pro_share == 0.0
    assert stats.free_share == 0.0


@pytest.mark.unit
def test_application_and_saved_job_ids_are_strings():
    app = Application.model_validate({"id": 1, "job_id": 2, "resume_id": 3, "status": "withdrawn"})
    saved = SavedJob.model_validate({"saved_id": 9, "job_id": 2, "title": "Dev"})

    assert (app.id, app.job_id, app.resume_id) == ("1", "2", "3")
    assert app.is_withdrawn
    assert saved.saved_id == "9"


@pytest.mark.unit
def test_format_date():
    assert format_date(datetime(2025, 1, 5)) == "Jan 05, 2025"
    assert format_date(None) == ""


@pytest.mark.unit
def test_safe_filename():
    assert safe_filename("My CV (final).pdf") == "My_CV_final.pdf"
    assert safe_filename("../../etc/passwd") == "etcpasswd"
    assert safe_filename("???") == "resume"
