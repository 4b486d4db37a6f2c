"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .notifier import Notifier
from .password_service import PasswordService
from .user_identity_service import UserIdentityService

__all__ = [
    "JWTService",
    "Notifier",
    "PasswordService",
    "Service",
    "UserIdentityService",
]
