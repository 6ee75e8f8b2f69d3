"""Authentication routes for the FastAPI application."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, status

from hostel.common import MessageResponse

from .models import LoginRequest, LoginResponse

if TYPE_CHECKING:
    from .authenticator import Authenticator

LOGGER = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    status.HTTP_401_UNAUTHORIZED: {
        "model": MessageResponse,
        "description": "User not found, or invalid password",
    },
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": MessageResponse,
        "description": "Database connection failed",
    },
}


async def _login(authenticator: Authenticator, body: LoginRequest) -> LoginResponse:
    LOGGER.info("Login attempt: %s %s", body.username, body.role)
    destination = await authenticator.authenticate(
        body.username,
        body.password,
        body.role,
    )
    return LoginResponse(redirect=destination)


def configure_auth_router(
    router: APIRouter,
    authenticator: Authenticator,
) -> APIRouter:
    """Configure the authentication router.

    Failures propagate as ``AuthError`` and are rendered by the
    application's exception handlers.

    :param router: The APIRouter to configure
    :param authenticator: The Authenticator checking credentials
    :return: The configured APIRouter
    """

    @router.post(
        "/login",
        response_model=LoginResponse,
        responses=_ERROR_RESPONSES,
    )
    async def login(body: LoginRequest) -> LoginResponse:
        return await _login(authenticator, body)

    return router
