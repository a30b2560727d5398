"""JWT Token Issuing and Verification"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from jose import jwt


class JWTVerifier:
    """Signs and verifies access tokens with a shared secret"""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 24 * 60):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def issue(self, subject: str, claims: Optional[Dict[str, Any]] = None) -> str:
        """Create a signed token for `subject` carrying extra `claims`."""
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "sub": subject,
            "iat": now,
            "exp": now + timedelta(minutes=self.expires_minutes),
        }
        if claims:
            payload.update(claims)
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify_and_decode(self, token: str) -> Dict:
        """
        Verify JWT token signature and decode payload

        Raises:
            JWTError: Token is invalid or expired
        """
        return jwt.decode(token, self.secret, algorithms=[self.algorithm])
