"""
Authentication context kept in the Flask session.

The API token and the user's profile are stored in the signed session cookie
on login and cleared on logout.
"""

from functools import wraps
from typing import Dict, List, Optional, Type, TypeVar

from flask import current_app, flash, g, redirect, request, session, url_for
from pydantic import ValidationError

from choojobs.models import User
from choojobs.services.api_client import ApiClient
from choojobs.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

NAV_ITEMS = [
    {"name": "Dashboard", "endpoint": "dashboard.index"},
    {"name": "Browse Jobs", "endpoint": "jobs.list_jobs"},
    {"name": "Saved Jobs", "endpoint": "library.saved_jobs"},
    {"name": "Applications", "endpoint": "library.applications"},
    {"name": "My Resumes", "endpoint": "resumes.index"},
    {"name": "Subscription", "endpoint": "billing.subscription"},
]
ADMIN_NAV_ITEM = {"name": "Admin Panel", "endpoint": "admin.index"}


def login_user(token: str, user: User) -> None:
    session.clear()
    session["token"] = token
    session["user"] = user.model_dump(mode="json")
    session.permanent = True
    g.pop("api_client", None)


def update_user(user: User) -> None:
    """Replace the cached profile, e.g. after a plan change."""
    session["user"] = user.model_dump(mode="json")


def logout_user() -> None:
    session.clear()
    g.pop("api_client", None)


def current_token() -> Optional[str]:
    return session.get("token")


def current_user() -> Optional[User]:
    data = session.get("user")
    if not data or not current_token():
        return None
    try:
        return User.model_validate(data)
    except ValidationError:
        logger.warning("Discarding unreadable user profile from session")
        session.clear()
        return None


def get_client() -> ApiClient:
    """API client for this request, carrying the session token."""
    if "api_client" not in g:
        factory = current_app.extensions["choojobs.client_factory"]
        g.api_client = factory(current_token())
    return g.api_client


def service(service_class: Type[T]) -> T:
    """Instantiate a service bound to this request's API client."""
    return service_class(get_client())


def nav_items(user: Optional[User]) -> List[Dict[str, str]]:
    if user is None:
        return []
    items = list(NAV_ITEMS)
    if user.is_admin:
        items.append(ADMIN_NAV_ITEM)
    return items


def login_required(f):
    """Redirect to the login page unless a user is signed in."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_user() is None:
            return redirect(url_for("public.login", next=request.path))
        return f(*args, **kwargs)
    return decorated_function


def admin_required(f):
    """Only let administrators through; others go back to the job list."""
    @wraps(f)
    @login_required
    def decorated_function(*args, **kwargs):
        if not current_user().is_admin:
            flash("Admin access required", "error")
            return redirect(url_for("jobs.list_jobs"))
        return f(*args, **kwargs)
    return decorated_function
