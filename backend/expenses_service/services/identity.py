from __future__ import annotations
import logging
from typing import NamedTuple, Optional
from flask_jwt_extended import decode_token

logger = logging.getLogger(__name__)

BEARER_PREFIX = 'Bearer '


class AuthenticatedUser(NamedTuple):
    id: str


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


class IdentityVerifier:
    """Resolve bearer tokens issued by the identity provider to users.

    Tokens are JWTs signed with the app's JWT_SECRET_KEY; the ``sub`` claim is the user id.
    Must be called inside an application context.
    """

    def resolve(self, token: Optional[str]) -> Optional[AuthenticatedUser]:
        if not token:
            return None
        try:
            claims = decode_token(token)
        except Exception as exc:
            logger.info('Rejected bearer token: %s', exc)
            return None
        subject = claims.get('sub')
        if not subject:
            return None
        return AuthenticatedUser(id=str(subject))

    def user_from_header(self, authorization: Optional[str]) -> Optional[AuthenticatedUser]:
        return self.resolve(extract_bearer_token(authorization))


__all__ = ['AuthenticatedUser', 'IdentityVerifier', 'extract_bearer_token']
