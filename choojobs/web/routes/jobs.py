"""
Job listing, job detail and AI match pages.
"""

from typing import Optional

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from choojobs.exceptions import ApiError, AuthenticationError, FormValidationError, NotFoundError
from choojobs.models import AnalysisResult, ApplicationStatus
from choojobs.services import ApplicationService, JobService, ResumeService, SavedJobService
from choojobs.utils.logger import get_logger
from choojobs.web.session_auth import login_required, service

logger = get_logger(__name__)

bp = Blueprint("jobs", __name__)

NO_RESUME_MESSAGE = "Please upload a resume first in the Resumes section!"
ANALYSIS_FAILED_MESSAGE = "Analysis failed. Make sure you have enough credits."


def _load_resumes():
    try:
        return service(ResumeService).list_resumes()
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to load resumes: {e}")
        return []


@bp.route("/jobs")
@login_required
def list_jobs():
    """Browse jobs with search and location filters."""
    search = request.args.get("search", "").strip()
    location = request.args.get("location", "").strip()
    page = request.args.get("page", 1, type=int) or 1
    
    job_page = None
    try:
        job_page = service(JobService).list_jobs(search=search, location=location, page=max(page, 1))
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to load jobs: {e}")
        flash(e.user_message("Failed to load jobs"), "error")
    
    return render_template(
        "jobs/list.html",
        job_page=job_page,
        resumes=_load_resumes(),
        search=search,
        location=location,
    )


def _render_detail(job_id: str, analysis: Optional[AnalysisResult] = None, selected_resume_id: str = ""):
    try:
        job = service(JobService).get_job(job_id)
    except NotFoundError:
        abort(404)
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to load job {job_id}: {e}")
        return render_template("error.html", message="Job not found"), 404
    
    resumes = _load_resumes()
    
    is_saved = False
    try:
        is_saved = service(SavedJobService).is_saved(job_id)
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to fetch saved status: {e}")
    
    application = service(ApplicationService).status_for_job(job_id)
    
    return render_template(
        "jobs/detail.html",
        job=job,
        resumes=resumes,
        selected_resume_id=selected_resume_id or (resumes[0].id if resumes else ""),
        is_saved=is_saved,
        application=application or ApplicationStatus(),
        analysis=analysis,
    )


@bp.route("/jobs/<job_id>")
@login_required
def job_detail(job_id):
    return _render_detail(job_id)


@bp.route("/jobs/<job_id>/analyze", methods=["POST"])
@login_required
def analyze(job_id):
    """Run the match engine and show the result on the job page."""
    resume_id = request.form.get("resume_id", "")
    if not resume_id:
        resumes = _load_resumes()
        resume_id = resumes[0].id if resumes else ""
    
    if not resume_id:
        flash(NO_RESUME_MESSAGE, "error")
        return redirect(request.referrer or url_for("jobs.list_jobs"))
    
    try:
        analysis = service(JobService).analyze_resume(job_id, resume_id)
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Analysis of job {job_id} failed: {e}")
        flash(ANALYSIS_FAILED_MESSAGE, "error")
        return redirect(request.referrer or url_for("jobs.job_detail", job_id=job_id))
    
    return _render_detail(job_id, analysis=analysis, selected_resume_id=resume_id)


@bp.route("/jobs/<job_id>/save", methods=["POST"])
@login_required
def toggle_save(job_id):
    currently_saved = request.form.get("saved") == "1"
    try:
        now_saved = service(SavedJobService).toggle(job_id, currently_saved)
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to toggle save for job {job_id}: {e}")
        flash("Failed to update saved jobs", "error")
    else:
        flash("Job saved" if now_saved else "Job removed from saved jobs", "success")
    
    return redirect(url_for("jobs.job_detail", job_id=job_id))


@bp.route("/jobs/<job_id>/apply", methods=["POST"])
@login_required
def apply(job_id):
    try:
        service(ApplicationService).apply(
            job_id,
            request.form.get("resume_id", ""),
            request.form.get("cover_letter", "").strip(),
        )
    except FormValidationError as e:
        flash(str(e), "error")
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Apply to job {job_id} failed: {e}")
        flash(e.user_message("Failed to apply"), "error")
    else:
        flash("Application submitted", "success")
    
    return redirect(url_for("jobs.job_detail", job_id=job_id))
