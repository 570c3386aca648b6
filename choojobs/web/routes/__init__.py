"""Page blueprints."""

from flask import Flask

from .public import bp as public_bp
from .dashboard import bp as dashboard_bp
from .jobs import bp as jobs_bp
from .library import bp as library_bp
from .resumes import bp as resumes_bp
from .billing import bp as billing_bp
from .admin import bp as admin_bp


def register_blueprints(app: Flask) -> None:
    for blueprint in (public_bp, dashboard_bp, jobs_bp, library_bp, resumes_bp, billing_bp, admin_bp):
        app.register_blueprint(blueprint)
