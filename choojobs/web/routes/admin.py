"""
Admin panel.
"""

from flask import Blueprint, flash, redirect, render_template, url_for

from choojobs.exceptions import ApiError, AuthenticationError
from choojobs.services import AdminService
from choojobs.utils.logger import get_logger
from choojobs.web.session_auth import admin_required, service

logger = get_logger(__name__)

bp = Blueprint("admin", __name__)


@bp.route("/admin")
@admin_required
def index():
    stats = None
    try:
        stats = service(AdminService).stats()
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to load admin stats: {e}")
        flash(e.user_message("Failed to load statistics"), "error")
    
    return render_template("admin.html", stats=stats)


@bp.route("/admin/scrape", methods=["POST"])
@admin_required
def trigger_scrape():
    try:
        service(AdminService).trigger_scrape()
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Failed to trigger scraper: {e}")
        flash(e.user_message("Failed to trigger scraper"), "error")
    else:
        flash("Scraper triggered successfully!", "success")
    
    return redirect(url_for("admin.index"))
