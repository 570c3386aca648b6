"""
Dashboard overview page.
"""

from flask import Blueprint, render_template

from choojobs.exceptions import ApiError, AuthenticationError
from choojobs.services import ApplicationService, AuthService, ResumeService, SavedJobService
from choojobs.utils.logger import get_logger
from choojobs.web.session_auth import current_user, login_required, service, update_user

logger = get_logger(__name__)

bp = Blueprint("dashboard", __name__)


@bp.route("/dashboard")
@login_required
def index():
    """Plan, credits and counts of the user's records."""
    user = current_user()
    try:
        user = service(AuthService).profile()
        update_user(user)
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.warning(f"Could not refresh profile: {e}")
    
    counts = {}
    sources = {
        "resumes": lambda: service(ResumeService).list_resumes(),
        "saved_jobs": lambda: service(SavedJobService).list_saved(),
        "applications": lambda: service(ApplicationService).list_applications(),
    }
    for name, fetch in sources.items():
        try:
            counts[name] = len(fetch())
        except AuthenticationError:
            raise
        except ApiError as e:
            logger.error(f"Failed to load {name}: {e}")
            counts[name] = None
    
    return render_template("dashboard.html", user=user, counts=counts)
