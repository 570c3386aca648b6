"""
Subscription payments.
"""

from choojobs.models import PaymentInitialization
from choojobs.services.api_client import ApiClient, unwrap
from choojobs.utils.logger import get_logger

logger = get_logger(__name__)


class PaymentService:
    """Open checkout sessions for the Pro plan."""
    
    def __init__(self, client: ApiClient):
        self.client = client
    
    def initialize(self, email: str, amount: int) -> PaymentInitialization:
        """
        Start a payment with the provider.
        
        Args:
            email: Billing email of the user
            amount: Price in the smallest currency unit
            
        Returns:
            PaymentInitialization holding the checkout URL
        """
        data = self.client.post("/payment/initialize", json={"email": email, "amount": amount})
        payment = PaymentInitialization.from_api(unwrap(data, "data", "/payment/initialize"))
        logger.info(f"💳 Payment initialized for {email} (reference: {payment.reference})")
        return payment
