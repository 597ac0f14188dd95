"""
Auth API routes — signup, signin, profile.

Route prefix: {api_prefix}/auth
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from auth.dependencies import get_auth_service, get_current_claims
from auth.jwt import TokenClaims
from auth.models import AuthResponse, SigninRequest, SignupRequest, UserProfile
from auth.service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    req: SignupRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register a new user."""
    return await service.signup(req.email, req.name, req.password)


@router.post("/signin", response_model=AuthResponse)
async def signin(
    req: SigninRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Login with email + password."""
    return await service.signin(req.email, req.password)


@router.get("/profile", response_model=UserProfile)
async def profile(
    claims: TokenClaims = Depends(get_current_claims),
    service: AuthService = Depends(get_auth_service),
) -> UserProfile:
    """Return the profile of the token's subject."""
    return await service.get_profile(claims.sub)
