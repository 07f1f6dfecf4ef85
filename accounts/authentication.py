"""
Accounts app authentication

Bearer tokens signed with the shared AUTH_SECRET. A token carries only the
username and its signing timestamp; it is validated on every request before
any view logic runs.
"""
import logging
from typing import Optional, Tuple

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core import signing
from rest_framework import authentication, exceptions

logger = logging.getLogger(__name__)

TOKEN_SALT = "accounts.bearer-token"


def _signer() -> signing.TimestampSigner:
    return signing.TimestampSigner(key=settings.AUTH_SECRET, salt=TOKEN_SALT)


def issue_token(user) -> str:
    """Sign a bearer token for the given user."""
    return _signer().sign(user.get_username())


def verify_token(token: str) -> str:
    """
    Return the username carried by a token.

    Raises:
        signing.BadSignature: If the token is malformed, forged or expired.
    """
    return _signer().unsign(token, max_age=settings.AUTH_TOKEN_MAX_AGE)


class SignedTokenAuthentication(authentication.BaseAuthentication):
    """
    Authenticate `Authorization: Bearer <token>` headers.

    Requests without a bearer header are left to the next authentication
    class; a bearer header that fails validation is rejected outright.
    """

    keyword = "Bearer"

    def authenticate(self, request) -> Optional[Tuple[object, str]]:
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword.lower().encode():
            return None

        if len(header) != 2:
            raise exceptions.AuthenticationFailed("Invalid token header.")

        try:
            token = header[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed("Invalid token header.")

        if token in ("null", "undefined"):
            raise exceptions.AuthenticationFailed("Invalid token.")

        try:
            username = verify_token(token)
        except signing.SignatureExpired:
            raise exceptions.AuthenticationFailed("Token has expired.")
        except signing.BadSignature:
            logger.warning("Rejected bearer token with a bad signature")
            raise exceptions.AuthenticationFailed("Invalid or expired token.")

        user_model = get_user_model()
        try:
            user = user_model.objects.get(**{user_model.USERNAME_FIELD: username})
        except user_model.DoesNotExist:
            raise exceptions.AuthenticationFailed("Invalid or expired token.")

        if not user.is_active:
            raise exceptions.AuthenticationFailed("User inactive or deleted.")

        return user, token

    def authenticate_header(self, request) -> str:
        return self.keyword
