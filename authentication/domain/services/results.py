"""
Result objects for the authentication services.

Dataclasses carry structured values inside a ServiceResult instead of
mixed tuples or dicts.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class LoginResult:
    """Tokens issued for a successful login."""

    user: Any  # CustomUser instance
    access_token: str
    refresh_token: str
    expires_in: int  # minutes


@dataclass
class RegisterResult:
    """Outcome of a registration; ``created`` is False for a compatibility echo."""

    user: Any
    created: bool = True
    message: Optional[str] = None
