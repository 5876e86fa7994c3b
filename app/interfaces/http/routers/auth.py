"""Signup, login and current-user endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from app.core.security import TokenIssuer
from app.interfaces.http.deps import get_account_service, get_current_token, get_token_issuer
from app.modules.accounts import (
    AccountAlreadyExistsError,
    AccountService,
    InvalidCredentialsError,
    User,
    UserCreateInput,
)
from app.schemas import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    SignupRequest,
    TokenData,
    UserResponse,
)

router = APIRouter()

_DUPLICATE_MESSAGES = {
    "email": "User with this email already exists",
    "username": "Username already taken",
}


def _auth_response(user: User, token_issuer: TokenIssuer) -> AuthResponse:
    return AuthResponse(
        token=token_issuer.issue(user.id, user.email),
        user=UserResponse.model_validate(user),
    )


@router.post("/signup", response_model=AuthResponse, summary="Create an account")
async def signup(
    payload: SignupRequest,
    account_service: AccountService = Depends(get_account_service),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthResponse:
    try:
        user = await account_service.register(
            UserCreateInput(
                email=payload.email,
                username=payload.username,
                password=payload.password,
                full_name=payload.full_name,
            )
        )
    except AccountAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_DUPLICATE_MESSAGES.get(exc.field, "Account already exists"),
        ) from exc
    return _auth_response(user, token_issuer)


@router.post("/login", response_model=AuthResponse, summary="Log in with email and password")
async def login(
    payload: LoginRequest,
    account_service: AccountService = Depends(get_account_service),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthResponse:
    try:
        user = await account_service.authenticate(payload.email, payload.password)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password") from exc
    return _auth_response(user, token_issuer)


@router.get("/me", response_model=CurrentUserResponse, summary="Current user profile")
async def me(
    token: TokenData = Depends(get_current_token),
    account_service: AccountService = Depends(get_account_service),
) -> CurrentUserResponse:
    user = await account_service.get_by_id(token.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return CurrentUserResponse(user=UserResponse.model_validate(user))
