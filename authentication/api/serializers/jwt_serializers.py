from rest_framework_simplejwt.tokens import RefreshToken


class RoleRefreshToken(RefreshToken):
    """Refresh token whose access tokens carry the user's role claim"""

    @classmethod
    def for_user(cls, user):
        token = cls()
        token["user_id"] = str(user.id)
        token["role"] = user.role
        token["email"] = user.email
        return token
