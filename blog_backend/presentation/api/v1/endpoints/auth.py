"""Account provisioning endpoint for the initial admin user."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from blog_backend.application.schemas import SignupRequest, SignupResponse
from blog_backend.application.services import AccountService
from blog_backend.domain.exceptions import IdentityProviderError, ValidationFailedError
from blog_backend.infrastructure.dependencies import get_account_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/signup", response_model=SignupResponse)
async def sign_up(
    data: SignupRequest,
    service: AccountService = Depends(get_account_service),
) -> SignupResponse:
    """Create a confirmed account with the identity provider."""
    try:
        user = await service.sign_up(data)
    except ValidationFailedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except IdentityProviderError as e:
        logger.warning("Signup rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST if 400 <= e.status_code < 500 else 502,
            detail=e.message,
        )
    return SignupResponse(user=user)
