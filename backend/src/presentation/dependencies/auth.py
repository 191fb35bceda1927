"""
Authentication Dependency for FastAPI.

Access tokens are issued by the authentication service; this API only
verifies them and reads the caller's user id, which becomes the `owner`
passed to the use cases. Ownership checks happen in the use cases.

Token claims:
- id        user id (required)
- username  optional, informational
- exp       expiry (required)
"""

import jwt
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from src.config.settings import get_config


@dataclass
class AuthUser:
    id: str
    username: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("AuthUser must have an id.")


security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is missing, invalid, expired, or lacks claims
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication",
        )

    config = get_config()
    try:
        claims = jwt.decode(
            credentials.credentials,
            config.ACCESS_TOKEN_KEY,
            algorithms=[config.ACCESS_TOKEN_ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
        )

    user_id = claims.get("id")
    if not user_id or not isinstance(user_id, str):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing required claims in token",
        )

    return AuthUser(id=user_id, username=claims.get("username"))
