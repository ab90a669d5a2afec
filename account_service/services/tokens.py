"""Session token issuance and verification.

Tokens are HS256 JWTs carrying only the user id. They have no expiry, so a
token stays valid for as long as the signing secret does. The secret is
always passed in by the caller.
"""

from jose import JWTError, jwt
from pydantic import ValidationError

from account_service.schemas.auth import TokenClaims

DEFAULT_ALGORITHM = "HS256"


def issue_token(user_id: int, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Sign a session token for a user."""
    claims = TokenClaims(id=user_id)
    return jwt.encode(claims.model_dump(), secret, algorithm=algorithm)


def verify_token(token: str, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> TokenClaims | None:
    """Verify a session token and return its claims.

    Returns None when the token is malformed, was signed with another
    secret, or does not carry an integer user id.
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError:
        return None

    try:
        return TokenClaims.model_validate(payload)
    except ValidationError:
        return None

