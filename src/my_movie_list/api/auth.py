"""Authentication API endpoints."""

from fastapi import APIRouter, Depends

from my_movie_list.api.dependencies import get_user_manager
from my_movie_list.schemas.user import Token, UserCreate, UserLogin, UserResponse
from my_movie_list.services.users import UserManager
from my_movie_list.utils.security import CurrentUser, create_access_token

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(
    user_data: UserCreate,
    users: UserManager = Depends(get_user_manager),
) -> UserResponse:
    """Register a new user.

    Raises:
        HTTPException 400: If the email, username or password is invalid
        HTTPException 409: If username or email already exists
    """
    user = await users.register(user_data.username, user_data.email, user_data.password)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=Token)
async def login(
    credentials: UserLogin,
    users: UserManager = Depends(get_user_manager),
) -> Token:
    """Authenticate user and return JWT token.

    Accepts either username or email in the username field.

    Raises:
        HTTPException 401: If credentials are invalid
        HTTPException 403: If user account is banned
    """
    user = await users.authenticate(credentials.username, credentials.password)
    access_token = create_access_token(data={"sub": user.user_id})
    return Token(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: CurrentUser) -> UserResponse:
    """Get the current authenticated user's information."""
    return UserResponse.model_validate(current_user)
