"""Dependency injection for FastAPI endpoints"""

import uuid
from typing import Optional
from fastapi import Header, Request
from pfhr_gateway.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> Optional[str]:
    """Authenticated user ID forwarded by the auth layer, None for anonymous callers"""
    return x_user_id or None


def new_session_id() -> str:
    """Generate a session ID for anonymous submissions"""
    return f"{settings.anonymous_session_prefix}{uuid.uuid4().hex}"
