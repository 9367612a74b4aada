from datetime import timedelta

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from videoteca.db import get_db
from videoteca.schemas.user import UserCreate, UserLogin, UserResponse, AuthResponse
from videoteca.services.user_service import UserService
from videoteca.core.auth import RequestContext, create_access_token, get_current_user
from videoteca.core.exceptions import handle_exception
from videoteca.core.config import get_settings
from videoteca.models.user import User

router = APIRouter(prefix="/auth", tags=["authentication"])

def issue_credential(user: User, message: str) -> AuthResponse:
    """Sign a token for ``user`` and wrap it in the auth response"""
    settings = get_settings()
    access_token = create_access_token(
        data={"sub": str(user.id), "email": user.email},
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return AuthResponse(
        message=message,
        token=access_token,
        user=UserResponse.model_validate(user),
    )

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user and return an access token"""
    try:
        user = UserService(db).create_user(user_data)
        return issue_credential(user, "Usuario registrado correctamente")
    except Exception as e:
        raise handle_exception(e)

@router.post("/login", response_model=AuthResponse)
def login(user_credentials: UserLogin, db: Session = Depends(get_db)):
    """Login user and return access token"""
    try:
        user = UserService(db).authenticate_user(user_credentials.email, user_credentials.password)
        return issue_credential(user, "Login exitoso")
    except Exception as e:
        raise handle_exception(e)

@router.get("/me", response_model=UserResponse)
def get_current_user_info(ctx: RequestContext = Depends(get_current_user), db: Session = Depends(get_db)):
    """Get current user information"""
    try:
        return UserService(db).get_user_by_id(ctx.user_id)
    except Exception as e:
        raise handle_exception(e)
