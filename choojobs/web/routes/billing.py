"""
Subscription and Pro plan upgrade.
"""

from flask import Blueprint, current_app, flash, redirect, render_template, url_for

from choojobs.exceptions import ApiError, AuthenticationError
from choojobs.services import AuthService, PaymentService
from choojobs.utils.logger import get_logger
from choojobs.web.session_auth import current_user, login_required, service, update_user

logger = get_logger(__name__)

bp = Blueprint("billing", __name__)


@bp.route("/subscription")
@login_required
def subscription():
    settings = current_app.config["SETTINGS"]
    return render_template(
        "subscription.html",
        user=current_user(),
        amount=settings.pro_plan_amount,
        free_analyses=settings.free_monthly_analyses,
    )


@bp.route("/subscription/upgrade", methods=["POST"])
@login_required
def upgrade():
    """Open a checkout session and send the user to the payment page."""
    user = current_user()
    if user.is_pro:
        return redirect(url_for("billing.subscription"))
    
    amount = current_app.config["SETTINGS"].pro_plan_amount
    try:
        payment = service(PaymentService).initialize(user.email, amount)
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Subscription initialization failed: {e}")
        flash("Subscription initialization failed.", "error")
        return redirect(url_for("billing.subscription"))
    
    return redirect(payment.authorization_url)


@bp.route("/subscription/callback")
@login_required
def payment_callback():
    """Landing point after checkout: pick up the new plan from the API."""
    try:
        user = service(AuthService).profile()
    except AuthenticationError:
        raise
    except ApiError as e:
        logger.error(f"Could not refresh profile after payment: {e}")
        flash("We could not confirm your payment yet. Please refresh in a moment.", "error")
    else:
        update_user(user)
        if user.is_pro:
            flash("Welcome to Pro!", "success")
    
    return redirect(url_for("billing.subscription"))
