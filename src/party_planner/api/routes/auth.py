"""Sign-up and sign-in endpoints."""

from fastapi import APIRouter, status
from starlette.requests import Request

from src.party_planner.api.dependencies import AuthServiceDep
from src.party_planner.core.config import get_settings
from src.party_planner.core.exceptions import ValidationFailed
from src.party_planner.core.rate_limit import limiter
from src.party_planner.schemas import AuthResponse, Envelope, SignInRequest, SignUpRequest, ok

router = APIRouter(tags=["auth"])

settings = get_settings()


@router.post(
    "/signUp",
    response_model=Envelope[AuthResponse],
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "Account created",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "response": {
                            "email": "a@b.com",
                            "accessToken": "3f9c...e1",
                            "userId": "0192f1d4-6f0e-7c2a-9a51-2b1f0c7d9e10",
                        },
                    }
                }
            },
        },
        400: {"description": "Invalid email or password too short"},
        409: {"description": "Email already registered"},
    },
)
@limiter.limit(settings.auth_rate_limit)
async def sign_up(
    request: Request, data: SignUpRequest, service: AuthServiceDep
) -> Envelope[AuthResponse]:
    """Create an account and return its access token."""
    user = await service.sign_up(data.email, data.password)
    return ok(AuthResponse(user_id=user.id, email=user.email, access_token=user.access_token))


@router.post(
    "/signIn",
    response_model=Envelope[AuthResponse],
    responses={
        200: {"description": "Credentials matched"},
        400: {"description": "Credentials did not match"},
    },
)
@limiter.limit(settings.auth_rate_limit)
async def sign_in(
    request: Request, data: SignInRequest, service: AuthServiceDep
) -> Envelope[AuthResponse]:
    """Return the account's existing token when email and password match.

    Unknown email and wrong password produce the same response.
    """
    user = await service.sign_in(data.email, data.password)
    if user is None:
        raise ValidationFailed("Credentials did not match", error_code="invalid_credentials")
    return ok(AuthResponse(user_id=user.id, email=user.email, access_token=user.access_token))
