"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from vocabmaster.exceptions import CredentialsException
from vocabmaster.infrastructure.identity.token_service import verify_access_token

# Tokens are obtained from the external auth provider
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


async def get_current_user_id(token: Annotated[str, Depends(oauth2_scheme)]) -> int:
    """
    Get the current user's ID from the access token.

    Args:
        token: JWT access token from Authorization header

    Returns:
        The authenticated user ID

    Raises:
        CredentialsException: If the token is invalid or expired
    """
    user_id = verify_access_token(token)
    if user_id is None or user_id <= 0:
        raise CredentialsException
    return user_id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]
