"""
User API routes.

Provides endpoints for referral program members:
- POST /user - Create user (or touch existing one), crediting the referrer
- GET /user/{wallet_address} - Get user, auto-creating unknown wallets
- PUT /user/{wallet_address} - Update username, referral code or avatar
"""

from fastapi import APIRouter, Depends, status

from parrain.application.use_cases.get_user_by_wallet import (
    GetUserByWallet,
    GetUserByWalletCommand,
)
from parrain.application.use_cases.resolve_or_create_user import (
    ResolveOrCreateUser,
    ResolveOrCreateUserCommand,
)
from parrain.application.use_cases.update_user_profile import (
    UpdateUserProfile,
    UpdateUserProfileCommand,
)
from parrain.di.dependencies import (
    get_get_user_by_wallet,
    get_resolve_or_create_user,
    get_update_user_profile,
)
from parrain.presentation.schemas.user_schemas import (
    CreateUserRequest,
    ErrorResponse,
    UpdateUserRequest,
    UserEnvelope,
    UserResponse,
)

router = APIRouter(prefix="/user", tags=["Users"])


@router.post(
    "",
    response_model=UserEnvelope,
    status_code=status.HTTP_200_OK,
    summary="Create or fetch user",
    description=(
        "Register wallet (crediting the referrer on first creation) "
        "or touch an existing user"
    ),
    responses={400: {"model": ErrorResponse}},
)
async def create_user(
    request: CreateUserRequest,
    use_case: ResolveOrCreateUser = Depends(get_resolve_or_create_user),
) -> UserEnvelope:
    """
    Create-or-touch user.

    Args:
        request: Wallet address and optional referral code
        use_case: ResolveOrCreateUser use case (injected)

    Returns:
        User envelope
    """
    result = await use_case.execute(
        ResolveOrCreateUserCommand(
            wallet_address=request.wallet_address,
            referred_by=request.referred_by,
        )
    )
    return UserEnvelope(user=UserResponse.from_entity(result.user))


@router.get(
    "/{wallet_address}",
    response_model=UserEnvelope,
    status_code=status.HTTP_200_OK,
    summary="Get user by wallet",
    description="Retrieve user by wallet address, creating it if unknown",
)
async def get_user(
    wallet_address: str,
    use_case: GetUserByWallet = Depends(get_get_user_by_wallet),
) -> UserEnvelope:
    """
    Get user by wallet address.

    Args:
        wallet_address: Wallet address to lookup
        use_case: GetUserByWallet use case (injected)

    Returns:
        User envelope
    """
    user = await use_case.execute(GetUserByWalletCommand(wallet_address=wallet_address))
    return UserEnvelope(user=UserResponse.from_entity(user))


@router.put(
    "/{wallet_address}",
    response_model=UserEnvelope,
    status_code=status.HTTP_200_OK,
    summary="Update user profile",
    description="Update username, referral code and/or avatar",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_user(
    wallet_address: str,
    request: UpdateUserRequest,
    use_case: UpdateUserProfile = Depends(get_update_user_profile),
) -> UserEnvelope:
    """
    Update user profile.

    Args:
        wallet_address: Wallet address of user to update
        request: Fields to update
        use_case: UpdateUserProfile use case (injected)

    Returns:
        User envelope

    Raises:
        EntityNotFoundError: 404 if wallet unknown
        ConflictError: 400 if username or referral code is taken
    """
    user = await use_case.execute(
        UpdateUserProfileCommand(
            wallet_address=wallet_address,
            username=request.username,
            referral_code=request.referral_code,
            avatar_url=request.avatar_update(),
        )
    )
    return UserEnvelope(user=UserResponse.from_entity(user))
