"""
Flask application factory.
"""

import os
from typing import Callable, Optional

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from choojobs import __version__
from choojobs.config.settings import Settings, get_settings
from choojobs.exceptions import AuthenticationError
from choojobs.services.api_client import ApiClient
from choojobs.utils.formatting import format_date
from choojobs.utils.logger import get_logger, setup_logging
from choojobs.web import session_auth
from choojobs.web.routes import register_blueprints

logger = get_logger(__name__)

ClientFactory = Callable[[Optional[str]], ApiClient]


def create_app(
    settings: Optional[Settings] = None,
    client_factory: Optional[ClientFactory] = None,
    configure_logging: bool = True
) -> Flask:
    """
    Build the web application.
    
    Args:
        settings: Application settings, loaded from the environment when omitted
        client_factory: Callable building an ApiClient for a session token
        configure_logging: Set up root logging from settings
        
    Returns:
        Configured Flask app
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(level=settings.log_level, log_file=settings.log_file)
    
    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["MAX_CONTENT_LENGTH"] = 10 * 1024 * 1024
    
    secret_key = settings.secret_key
    if not secret_key:
        logger.warning("⚠️  SECRET_KEY not set. Generating random key (sessions will not persist between restarts)")
        secret_key = os.urandom(24).hex()
    app.secret_key = secret_key
    
    if client_factory is None:
        def client_factory(token: Optional[str]) -> ApiClient:
            return ApiClient(settings.api_base_url, token=token, timeout=settings.timeout)
    app.extensions["choojobs.client_factory"] = client_factory
    
    register_blueprints(app)
    app.add_template_filter(format_date, "date")
    
    @app.context_processor
    def inject_layout():
        """Values every page needs for the sidebar."""
        user = session_auth.current_user()
        return {
            "app_name": settings.app_name,
            "version": __version__,
            "current_user": user,
            "nav_items": session_auth.nav_items(user),
        }
    
    @app.errorhandler(AuthenticationError)
    def handle_expired_session(error):
        logger.warning(f"Session rejected by API: {error}")
        session_auth.logout_user()
        flash("Your session has expired. Please sign in again.", "error")
        return redirect(url_for("public.login", next=request.path))
    
    @app.errorhandler(404)
    def handle_not_found(error):
        return render_template("error.html", message="Page not found"), 404
    
    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "version": __version__, "api_url": settings.api_base_url})
    
    logger.info(f"🌐 {settings.app_name} web client ready (API: {settings.api_base_url})")
    return app
