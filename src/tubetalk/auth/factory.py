"""Factory for creating the auth adapter from settings."""

from __future__ import annotations

import os
from functools import lru_cache

from ..config import DEV_JWT_SECRET, is_production, settings
from ..logging import get_logger
from .adapters.base import AuthAdapter
from .adapters.jwt import JWTAuthAdapter

logger = get_logger(__name__)


def get_auth_adapter() -> AuthAdapter:
    """Create and return the configured auth adapter."""
    secret_key = os.getenv("TUBETALK_JWT_SECRET") or settings.jwt_secret
    if not secret_key:
        raise ValueError("JWT secret key is required. Set TUBETALK_JWT_SECRET.")

    if secret_key == DEV_JWT_SECRET:
        if is_production():
            raise ValueError("Refusing to use the development JWT secret in production")
        logger.warning("Using development JWT secret; set TUBETALK_JWT_SECRET")

    return JWTAuthAdapter(
        secret_key=secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        token_expiry_hours=settings.token_expiry_hours,
    )


@lru_cache(maxsize=1)
def get_auth_adapter_cached() -> AuthAdapter:
    """Get cached auth adapter instance."""
    return get_auth_adapter()
