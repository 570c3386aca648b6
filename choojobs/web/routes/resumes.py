"""
Resume upload and export pages.
"""

from io import BytesIO

from flask import Blueprint, current_app, flash, redirect, render_template, request, send_file, url_for

from choojobs.exceptions import ApiError, AuthenticationError, FormValidationError, PermissionDeniedError
from choojobs.services import ResumeService
from choojobs.utils.logger import get_logger
from choojobs.web.session_auth import current_user, get_client, login_required, service

logger = get_logger(__name__)

bp = Blueprint("resumes", __name__)


@bp.route("/resumes")
@login_required
def index():
    resumes = []
    try:
        resumes = service(ResumeService).list_resumes()
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to load resumes: {e}")
        flash("Failed to load resumes", "error")
    
    return render_template(
        "resumes.html",
        resumes=resumes,
        user=current_user(),
        export_formats=current_app.config["SETTINGS"].export_formats,
    )


@bp.route("/resumes/upload", methods=["POST"])
@login_required
def upload():
    upload_file = request.files.get("resume")
    try:
        if upload_file is None:
            raise FormValidationError("Please choose a file to upload")
        service(ResumeService).upload(upload_file.filename, upload_file.stream, upload_file.mimetype)
    except FormValidationError as e:
        flash(str(e), "error")
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Resume upload failed: {e}")
        flash("Upload failed", "error")
    else:
        flash("Resume uploaded", "success")
    
    return redirect(url_for("resumes.index"))


@bp.route("/resumes/<resume_id>/export", methods=["POST"])
@login_required
def export(resume_id):
    """Stream an exported PDF/DOCX back to the browser."""
    fmt = request.form.get("format", "pdf")
    try:
        resume_service = ResumeService(get_client(), current_app.config["SETTINGS"].export_formats)
        exported = resume_service.export(resume_id, fmt, name=request.form.get("filename"))
    except FormValidationError as e:
        flash(str(e), "error")
    except PermissionDeniedError as e:
        flash(e.user_message("Export is available on the Pro plan"), "error")
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Resume export failed: {e}")
        flash(e.user_message("Export failed"), "error")
    else:
        return send_file(
            BytesIO(exported.content),
            mimetype=exported.content_type,
            as_attachment=True,
            download_name=exported.filename,
        )
    
    return redirect(url_for("resumes.index"))
