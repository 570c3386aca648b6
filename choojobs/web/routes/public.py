"""
Landing page and account pages that work without a session.
"""

from flask import Blueprint, flash, redirect, render_template, request, url_for

from choojobs.exceptions import ApiError, FormValidationError
from choojobs.services import AuthService
from choojobs.utils.logger import get_logger
from choojobs.web.session_auth import current_user, get_client, login_user, logout_user, service

logger = get_logger(__name__)

bp = Blueprint("public", __name__)

LOGIN_ERRORS = {
    "oauth_failed": "Google sign-in failed. Please try again.",
}


def _safe_next(target: str) -> str:
    """Only follow redirects to paths on this site."""
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return url_for("jobs.list_jobs")


@bp.route("/")
def landing():
    return render_template("landing.html")


@bp.route("/login", methods=["GET", "POST"])
def login():
    """Sign in with email and password."""
    if request.method == "GET" and current_user() is not None:
        return redirect(url_for("jobs.list_jobs"))
    
    error = LOGIN_ERRORS.get(request.args.get("error", ""))
    email = request.form.get("email", "").strip()
    
    if request.method == "POST":
        password = request.form.get("password", "")
        try:
            auth = service(AuthService).login(email, password)
        except ApiError as e:
            logger.error(f"Login failed for {email}: {e}")
            error = e.user_message("Invalid email or password")
        else:
            login_user(auth.token, auth.user)
            return redirect(_safe_next(request.args.get("next", "")))
    
    return render_template("auth/login.html", error=error, email=email)


@bp.route("/register", methods=["GET", "POST"])
def register():
    error = None
    form = {
        "full_name": request.form.get("full_name", "").strip(),
        "email": request.form.get("email", "").strip(),
    }
    
    if request.method == "POST":
        try:
            service(AuthService).register(form["email"], request.form.get("password", ""), form["full_name"])
        except ApiError as e:
            logger.error(f"Registration failed for {form['email']}: {e}")
            error = e.user_message("Registration failed")
        else:
            flash("Account created. You can sign in now.", "success")
            return redirect(url_for("public.login"))
    
    return render_template("auth/register.html", error=error, form=form)


@bp.route("/logout", methods=["POST"])
def logout():
    logout_user()
    return redirect(url_for("public.login"))


@bp.route("/forgot-password", methods=["GET", "POST"])
def forgot_password():
    status = "idle"
    message = None
    email = request.form.get("email", "").strip()
    
    if request.method == "POST":
        try:
            service(AuthService).forgot_password(email)
        except ApiError as e:
            logger.error(f"Password reset request failed: {e}")
            status = "error"
            message = e.user_message("Failed to send reset email")
        else:
            status = "sent"
            message = "If that email exists, a reset link was sent."
    
    return render_template("auth/forgot_password.html", status=status, message=message, email=email)


@bp.route("/reset-password/<token>", methods=["GET", "POST"])
def reset_password(token):
    message = None
    
    if request.method == "POST":
        try:
            service(AuthService).reset_password(
                token,
                request.form.get("password", ""),
                request.form.get("confirm_password", ""),
            )
        except FormValidationError as e:
            message = str(e)
        except ApiError as e:
            logger.error(f"Password reset failed: {e}")
            message = e.user_message("Failed to reset password. Link may have expired.")
        else:
            flash("Password reset successfully! Please sign in.", "success")
            return redirect(url_for("public.login"))
    
    return render_template("auth/reset_password.html", token=token, message=message)


@bp.route("/auth/google")
def google_login():
    return redirect(AuthService(get_client()).google_login_url())


@bp.route("/auth/callback")
def auth_callback():
    """Finish the Google OAuth flow: the API redirects here with a token."""
    token = request.args.get("token")
    if not token:
        return redirect(url_for("public.login"))
    
    logout_user()
    client = get_client()
    client.token = token
    try:
        user = AuthService(client).profile()
    except ApiError as e:
        logger.error(f"OAuth profile fetch failed: {e}")
        return redirect(url_for("public.login", error="oauth_failed"))
    
    login_user(token, user)
    return redirect(url_for("jobs.list_jobs"))
