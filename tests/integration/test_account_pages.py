"""Integration tests for saved jobs, applications, resumes, subscription and admin pages."""

from io import BytesIO

import pytest

from choojobs.exceptions import ApiError, PermissionDeniedError
from tests.conftest import ADMIN, USER, make_response, sign_in


@pytest.mark.integration
def test_dashboard_refreshes_profile_and_counts(user_client, backend):
    backend.on("GET", "/auth/profile", dict(USER, credits=2))
    backend.on("GET", "/resumes", [{"id": "r1", "filename": "a.pdf"}])
    backend.on("GET", "/saved-jobs", {"savedJobs": []})
    backend.on("GET", "/applications", ApiError("500", status_code=500))

    response = user_client.get("/dashboard")

    assert response.status_code == 200
    assert "—".encode() in response.data
    with user_client.session_transaction() as sess:
        assert sess["user"]["credits"] == 2


@pytest.mark.integration
def test_saved_jobs_list_and_remove(user_client, backend):
    backend.on("GET", "/saved-jobs", {"savedJobs": [
        {"saved_id": 1, "job_id": 5, "title": "Backend Engineer", "company": "Acme", "saved_at": "2025-03-02T00:00:00Z"},
    ]})
    backend.on("DELETE", "/saved-jobs/jobs/5/save", {"saved": False})

    response = user_client.get("/saved-jobs")
    assert b"Backend Engineer" in response.data
    assert b"Saved on Mar 02, 2025" in response.data

    response = user_client.post("/saved-jobs/5/remove")
    assert response.headers["Location"].endswith("/saved-jobs")
    assert backend.called("DELETE", "/saved-jobs/jobs/5/save")


@pytest.mark.integration
def test_saved_jobs_fetch_failure(user_client, backend):
    backend.on("GET", "/saved-jobs", ApiError("500", status_code=500))

    response = user_client.get("/saved-jobs")

    assert b"Failed to fetch saved jobs" in response.data


@pytest.mark.integration
def test_remove_saved_failure(user_client, backend):
    backend.on("DELETE", "/saved-jobs/jobs/5/save", ApiError("500", status_code=500))
    backend.on("GET", "/saved-jobs", [])

    response = user_client.post("/saved-jobs/5/remove", follow_redirects=True)

    assert b"Failed to remove saved job" in response.data


@pytest.mark.integration
def test_applications_list_and_withdraw(user_client, backend):
    backend.on("GET", "/applications", {"applications": [
        {"id": 11, "job_id": 5, "job_title": "Backend Engineer", "company": "Acme",
         "status": "pending", "applied_at": "2025-03-03T00:00:00Z"},
        {"id": 12, "job_id": 6, "job_title": "Data Engineer", "status": "withdrawn"},
    ]})
    backend.on("PUT", "/applications/11/withdraw", None)

    response = user_client.get("/applications")
    assert b"Applied on Mar 03, 2025" in response.data
    assert response.data.count(b"Withdraw this application?") == 1

    response = user_client.post("/applications/11/withdraw", follow_redirects=True)
    assert b"Application withdrawn" in response.data


@pytest.mark.integration
def test_withdraw_failure(user_client, backend):
    backend.on("PUT", "/applications/11/withdraw", ApiError("500", status_code=500))
    backend.on("GET", "/applications", [])

    response = user_client.post("/applications/11/withdraw", follow_redirects=True)

    assert b"Failed to withdraw application" in response.data


@pytest.mark.integration
def test_resumes_page_and_upload(user_client, backend):
    backend.on("GET", "/resumes", [{"id": "r1", "filename": "ada.pdf"}])
    backend.on("POST", "/resumes/upload", {"id": "r2"})

    response = user_client.get("/resumes")
    assert b"ada.pdf" in response.data
    assert b"AI Ready" in response.data

    response = user_client.post(
        "/resumes/upload",
        data={"resume": (BytesIO(b"%PDF-1.4"), "new.pdf")},
        content_type="multipart/form-data",
        follow_redirects=True,
    )
    assert b"Resume uploaded" in response.data
    assert backend.called("POST", "/resumes/upload")[0][2]["files"]["resume"][0] == "new.pdf"


@pytest.mark.integration
def test_upload_failure(user_client, backend):
    backend.on("GET", "/resumes", [])
    backend.on("POST", "/resumes/upload", ApiError("500", status_code=500))

    response = user_client.post(
        "/resumes/upload",
        data={"resume": (BytesIO(b"x"), "cv.pdf")},
        content_type="multipart/form-data",
        follow_redirects=True,
    )

    assert b"Upload failed" in response.data


@pytest.mark.integration
def test_export_downloads_file(user_client, backend):
    backend.on("POST", "/resumes/export", make_response(
        content=b"%PDF-1.4", headers={"Content-Type": "application/pdf"},
    ))

    response = user_client.post("/resumes/r1/export", data={"format": "pdf", "filename": "ada.pdf"})

    assert response.status_code == 200
    assert response.data == b"%PDF-1.4"
    assert "ada.pdf" in response.headers["Content-Disposition"]


@pytest.mark.integration
def test_export_requires_pro(user_client, backend):
    backend.on("POST", "/resumes/export", PermissionDeniedError("403", status_code=403))
    backend.on("GET", "/resumes", [])

    response = user_client.post("/resumes/r1/export", data={"format": "pdf"}, follow_redirects=True)

    assert b"Export is available on the Pro plan" in response.data


@pytest.mark.integration
def test_subscription_free_user_sees_upgrade(user_client):
    response = user_client.get("/subscription")

    assert b"Upgrade Now" in response.data
    assert b"5 AI match analyses per month" in response.data


@pytest.mark.integration
def test_subscription_pro_user_sees_active_plan(client):
    sign_in(client, dict(USER, plan="pro"))

    response = client.get("/subscription")

    assert b"Active Plan" in response.data
    assert b"Upgrade Now" not in response.data


@pytest.mark.integration
def test_upgrade_redirects_to_checkout(user_client, backend):
    backend.on("POST", "/payment/initialize", {
        "data": {"authorization_url": "https://checkout.paystack.com/xyz", "reference": "r"},
    })

    response = user_client.post("/subscription/upgrade")

    assert response.status_code == 302
    assert response.headers["Location"] == "https://checkout.paystack.com/xyz"
    assert backend.calls[0][2]["json"] == {"email": "ada@example.com", "amount": 5000}


@pytest.mark.integration
def test_upgrade_failure(user_client, backend):
    backend.on("POST", "/payment/initialize", ApiError("500", status_code=500))

    response = user_client.post("/subscription/upgrade", follow_redirects=True)

    assert b"Subscription initialization failed." in response.data


@pytest.mark.integration
def test_payment_callback_refreshes_plan(user_client, backend):
    backend.on("GET", "/auth/profile", dict(USER, plan="pro"))

    response = user_client.get("/subscription/callback", follow_redirects=True)

    assert b"Welcome to Pro!" in response.data
    assert b"Active Plan" in response.data


@pytest.mark.integration
def test_admin_panel_forbidden_for_users(user_client, backend):
    response = user_client.get("/admin")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/jobs")
    assert backend.calls == []


@pytest.mark.integration
def test_admin_panel_stats(admin_client, backend):
    backend.on("GET", "/admin/stats", {
        "users": {"total_users": "4", "pro_users": "1", "free_users": "3"},
        "analyses": {"total_analyses": "9", "avg_score": 71.25},
        "jobs": {"total_jobs": "300"},
    })

    response = admin_client.get("/admin")

    assert response.status_code == 200
    assert b"Admin Panel" in response.data
    assert b"300" in response.data
    assert b"Pro (25%)" in response.data
    assert b"Average score 71.2" in response.data


@pytest.mark.integration
def test_admin_trigger_scrape(admin_client, backend):
    backend.on("POST", "/admin/scrape", {"message": "started"})
    backend.on("GET", "/admin/stats", {})

    response = admin_client.post("/admin/scrape", follow_redirects=True)

    assert b"Scraper triggered successfully!" in response.data
    assert backend.called("POST", "/admin/scrape")[0][3] == "admin-token"


@pytest.mark.integration
def test_upgrade_without_checkout_data(user_client, backend):
    backend.on("POST", "/payment/initialize", {"status": False, "message": "Invalid key"})

    response = user_client.post("/subscription/upgrade")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/subscription")
    with user_client.session_transaction() as sess:
        assert ("error", "Subscription initialization failed.") in sess["_flashes"]


@pytest.mark.integration
def test_export_formats_follow_settings(app, user_client, backend):
    app.config["SETTINGS"].export_formats = ["pdf"]
    backend.on("GET", "/resumes", [{"id": "r1", "filename": "ada.pdf"}])

    page = user_client.get("/resumes")
    assert b'value="pdf"' in page.data
    assert b'value="docx"' not in page.data

    response = user_client.post("/resumes/r1/export", data={"format": "docx"}, follow_redirects=True)
    assert b"Unsupported export format: docx" in response.data
    assert not backend.called("POST", "/resumes/export")
