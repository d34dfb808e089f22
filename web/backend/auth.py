#!/usr/bin/env python3
"""
JWT route guards.

Tokens carry ``{"username": ..., "isAdmin": ...}`` and are signed with the
configured secret. A missing or unverifiable token simply means "anonymous";
the guards decide whether anonymous callers may proceed.
"""

import logging
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends, Request

from .config import get_config
from .exceptions import UnauthorizedException

logger = logging.getLogger(__name__)


def create_token(username: str, is_admin: bool = False) -> str:
    """Sign a token for ``username``."""
    auth = get_config().auth
    payload = {"username": username, "isAdmin": is_admin}
    return jwt.encode(payload, auth.secret_key, algorithm=auth.algorithm)


def get_current_user(request: Request) -> Optional[Dict[str, Any]]:
    """Return the verified token payload from the Authorization header, if any."""
    header = request.headers.get("authorization")
    if not header:
        return None

    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None

    auth = get_config().auth
    try:
        return jwt.decode(token.strip(), auth.secret_key, algorithms=[auth.algorithm])
    except jwt.InvalidTokenError as e:
        logger.debug(f"Rejected token: {e}")
        return None


def ensure_logged_in(user: Optional[Dict[str, Any]] = Depends(get_current_user)) -> Dict[str, Any]:
    if not user:
        raise UnauthorizedException("Unauthorized")
    return user


def ensure_admin(user: Dict[str, Any] = Depends(ensure_logged_in)) -> Dict[str, Any]:
    if not user.get("isAdmin"):
        raise UnauthorizedException("Unauthorized")
    return user
