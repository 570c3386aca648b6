"""
Account and authentication service.
"""

from choojobs.exceptions import FormValidationError
from choojobs.models import AuthSession, User
from choojobs.services.api_client import ApiClient, unwrap
from choojobs.utils.logger import get_logger

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthService:
    """Sign-in, registration and password recovery against the API."""
    
    def __init__(self, client: ApiClient):
        self.client = client
    
    def login(self, email: str, password: str) -> AuthSession:
        """
        Exchange credentials for a session token.
        
        Args:
            email: Account email
            password: Account password
            
        Returns:
            AuthSession with token and user profile
        """
        data = self.client.post("/auth/login", json={"email": email, "password": password})
        token = unwrap(data, "token", "/auth/login")
        
        user_data = data.get("user")
        if user_data is None:
            # Some deployments only return the token
            self.client.token = token
            user_data = self.client.get("/auth/profile")
        
        session = AuthSession(token=token, user=User.from_api(user_data))
        logger.info(f"✅ Signed in as {session.user.email}")
        return session
    
    def register(self, email: str, password: str, full_name: str) -> None:
        self.client.post("/auth/register", json={
            "email": email,
            "password": password,
            "full_name": full_name,
        })
        logger.info(f"✅ Registered {email}")
    
    def forgot_password(self, email: str) -> None:
        self.client.post("/auth/forgot-password", json={"email": email})
    
    def reset_password(self, token: str, password: str, confirm_password: str) -> None:
        """
        Set a new password using the token from a reset email.
        
        Raises:
            FormValidationError: If the passwords are missing, too short or differ
        """
        validate_new_password(password, confirm_password)
        self.client.post(f"/auth/reset-password/{token}", json={"newPassword": password})
        logger.info("✅ Password reset")
    
    def profile(self) -> User:
        return User.from_api(self.client.get("/auth/profile"))
    
    def google_login_url(self) -> str:
        """Start of the Google OAuth flow, served by the API."""
        return self.client.url_for("/auth/google")


def validate_new_password(password: str, confirm_password: str) -> None:
    """Check a new password pair, raising FormValidationError on the first problem."""
    if not password or not confirm_password:
        raise FormValidationError("Both password fields are required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise FormValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if password != confirm_password:
        raise FormValidationError("Passwords do not match")
