from __future__ import annotations

from functools import wraps
from typing import Tuple

from flask import request

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError


def basic_credentials() -> Tuple[str, str]:
    """Email/password pair from an HTTP Basic ``Authorization`` header."""
    auth = request.authorization
    if auth is None or auth.type != "basic" or not auth.username:
        raise AuthenticationError("Authentification requise.")
    return auth.username, auth.password or ""


def role_required(container: Container, role: Role):
    """Authenticate the caller, check its role, then call the view with the capability.

    Runs before the body is parsed: a 401/403 never reaches validation or the store.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            email, password = basic_credentials()
            caller = container.auth_service.authorize(email, password, role)
            return view(caller, *args, **kwargs)

        return wrapper

    return decorator
