"""
Bearer authentication that insists on the claims the API relies on.

A token is accepted only if its ``user_id`` claim is a UUID of an existing,
active and unlocked account and it carries a ``role`` claim.
"""

import logging

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken
from rest_framework_simplejwt.settings import api_settings

from utils.responses import parse_uuid

logger = logging.getLogger(__name__)


class ClaimsJWTAuthentication(JWTAuthentication):
    def get_user(self, validated_token):
        raw_user_id = validated_token.get(api_settings.USER_ID_CLAIM)
        if parse_uuid(raw_user_id) is None:
            raise InvalidToken("Token contained no recognizable user identification")

        if not validated_token.get("role"):
            raise InvalidToken("Token contained no role claim")

        user = super().get_user(validated_token)

        if not user.is_active:
            raise AuthenticationFailed("User is inactive", code="user_inactive")
        if user.is_locked:
            logger.info("Rejected token for locked user_id=%s", user.id)
            raise AuthenticationFailed("Account is locked", code="user_locked")

        return user
