"""
Saved jobs and submitted applications.
"""

from flask import Blueprint, flash, redirect, render_template, url_for

from choojobs.exceptions import ApiError, AuthenticationError
from choojobs.services import ApplicationService, SavedJobService
from choojobs.utils.logger import get_logger
from choojobs.web.session_auth import login_required, service

logger = get_logger(__name__)

bp = Blueprint("library", __name__)


@bp.route("/saved-jobs")
@login_required
def saved_jobs():
    saved = []
    try:
        saved = service(SavedJobService).list_saved()
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to fetch saved jobs: {e}")
        flash("Failed to fetch saved jobs", "error")
    
    return render_template("saved_jobs.html", saved=saved)


@bp.route("/saved-jobs/<job_id>/remove", methods=["POST"])
@login_required
def remove_saved(job_id):
    try:
        service(SavedJobService).unsave(job_id)
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to remove saved job {job_id}: {e}")
        flash("Failed to remove saved job", "error")
    
    return redirect(url_for("library.saved_jobs"))


@bp.route("/applications")
@login_required
def applications():
    items = []
    try:
        items = service(ApplicationService).list_applications()
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to fetch applications: {e}")
        flash("Failed to fetch applications", "error")
    
    return render_template("applications.html", applications=items)


@bp.route("/applications/<application_id>/withdraw", methods=["POST"])
@login_required
def withdraw(application_id):
    try:
        service(ApplicationService).withdraw(application_id)
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to withdraw application {application_id}: {e}")
        flash("Failed to withdraw application", "error")
    else:
        flash("Application withdrawn", "success")
    
    return redirect(url_for("library.applications"))
