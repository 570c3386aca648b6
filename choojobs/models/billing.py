"""Payment models."""

from typing import Optional

from .base import ApiModel


class PaymentInitialization(ApiModel):
    """Checkout session opened with the payment provider."""
    authorization_url: str
    reference: Optional[str] = None
    access_code: Optional[str] = None
