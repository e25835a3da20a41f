"""
Bearer token verification
Resolves an Authorization header to an active row of the usuarios table
"""

from typing import Any, Dict, Optional

import httpx
import jwt
from postgrest.exceptions import APIError
import structlog

from app.utils.exceptions import (
    MissingTokenError, InvalidTokenError, UserNotFoundError, UserInactiveError
)

logger = structlog.get_logger(__name__)

USERS_TABLE = "usuarios"
ACTIVE_STATUS = "ativo"


class CredentialValidator:
    """Verifies JWTs signed with the shared secret and loads the caller"""

    def __init__(self, client: Optional[Any], secret: str, algorithm: str = "HS256", user_claim: str = "id"):
        self.client = client
        self.secret = secret
        self.algorithm = algorithm
        self.user_claim = user_claim

    @staticmethod
    def extract_token(authorization: Optional[str]) -> str:
        """
        Extract token from an Authorization header

        Args:
            authorization: Raw header value, expected as "Bearer <token>"

        Returns:
            The token segment

        Raises:
            MissingTokenError: If the header, the scheme or the token is absent
        """
        if not authorization:
            raise MissingTokenError("Authorization header not provided")

        parts = authorization.strip().split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise MissingTokenError("Authorization header is not in the form 'Bearer <token>'")

        return parts[1]

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry, returning the claims"""
        if not self.secret:
            raise InvalidTokenError("Token secret is not configured")

        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError("Token has expired")
        except jwt.PyJWTError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

    async def get_user(self, user_id: Any) -> Dict[str, Any]:
        """Fetch the usuarios row for the token subject"""
        if self.client is None:
            raise UserNotFoundError("User lookup failed: store client not available")

        try:
            response = await (
                self.client.table(USERS_TABLE)
                .select("*")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            raise UserNotFoundError(f"User lookup failed: {e}")

        if not response.data:
            raise UserNotFoundError(f"User {user_id} not found")
        return response.data[0]

    async def validate(self, authorization: Optional[str]) -> Dict[str, Any]:
        """
        Authorize a request

        Args:
            authorization: Raw Authorization header value

        Returns:
            dict: The usuarios row of the caller

        Raises:
            AuthenticationError: One of the missing/invalid/not found/inactive kinds
        """
        token = self.extract_token(authorization)
        claims = self.decode_token(token)

        user_id = claims.get(self.user_claim)
        if user_id is None:
            raise InvalidTokenError(f"Token has no '{self.user_claim}' claim")

        user = await self.get_user(user_id)
        if user.get("status") != ACTIVE_STATUS:
            raise UserInactiveError(f"User {user_id} is not active")

        logger.debug("Token verified", user_id=str(user_id))
        return user
