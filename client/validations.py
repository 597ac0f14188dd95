"""
Client-side form validation, run before anything is sent to the server.

Each validator returns an error message, or ``None`` when the value is fine.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_SPECIAL_RE = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")


def validate_email(email: str) -> Optional[str]:
    if not email:
        return "Email is required"
    if not _EMAIL_RE.match(email):
        return "Please enter a valid email address"
    return None


def validate_name(name: str) -> Optional[str]:
    if not name:
        return "Name is required"
    if len(name) < 3:
        return "Name must be at least 3 characters long"
    return None


def validate_password(password: str) -> Optional[str]:
    if not password:
        return "Password is required"
    if len(password) < 8:
        return "Password must be at least 8 characters long"
    if not re.search(r"[a-zA-Z]", password):
        return "Password must contain at least one letter"
    if not re.search(r"\d", password):
        return "Password must contain at least one number"
    if not _SPECIAL_RE.search(password):
        return "Password must contain at least one special character"
    return None


def validate_form(
    email: str,
    password: str,
    name: Optional[str] = None,
) -> Dict[str, str]:
    """
    Validate a signin form, or a signup form when ``name`` is given.

    Returns a ``{field: message}`` dict; empty means the form is valid.
    """
    errors: Dict[str, str] = {}

    email_error = validate_email(email)
    password_error = validate_password(password)
    name_error = validate_name(name) if name is not None else None

    if email_error:
        errors["email"] = email_error
    if password_error:
        errors["password"] = password_error
    if name_error:
        errors["name"] = name_error
    return errors
