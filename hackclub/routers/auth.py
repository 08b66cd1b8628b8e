import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from hackclub.core.config.settings import get_settings
from hackclub.core.security.auth import AuthService, get_auth_service, get_current_user
from hackclub.crud import users as users_crud
from hackclub.db.session import get_db
from hackclub.models.user import User, RoleType
from hackclub.schemas.user import (
    AuthResponse,
    GoogleAuthRequest,
    LoginRequest,
    RegisterRequest,
    UserDisplay,
)
from hackclub.services.firebase import FirebaseVerifier, get_firebase_verifier
from hackclub.utils.helpers import validate_password_strength

logger = logging.getLogger("hackclub.auth")

router = APIRouter(prefix="/auth", tags=["authentication"])

def _initial_role(email: str) -> RoleType:
    admin_emails = {address.lower() for address in get_settings().ADMIN_EMAILS}
    return RoleType.ADMIN if email.lower() in admin_emails else RoleType.USER

def _auth_response(user: User, auth: AuthService) -> AuthResponse:
    return AuthResponse(
        access_token=auth.generate_token(user.id),
        user=UserDisplay.model_validate(user),
    )

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    is_valid, message = validate_password_strength(request.password)
    if not is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)

    # Check if email already exists
    if users_crud.get_user_by_email(db, request.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )

    user = users_crud.create_user(db, {
        "name": request.name,
        "email": request.email,
        "hashed_password": auth.create_hashed_password(request.password),
        "role": _initial_role(request.email),
    })
    logger.info(f"Registered user {user.id} as {user.role.value}")
    return _auth_response(user, auth)

@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    user = users_crud.get_user_by_email(db, request.email)

    # Verify credentials
    if not user or not auth.verify_password(request.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    return _auth_response(user, auth)

@router.post("/google", response_model=AuthResponse)
def google_sign_in(
    request: GoogleAuthRequest,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
    verifier: FirebaseVerifier = Depends(get_firebase_verifier),
):
    claims = verifier.verify(request.id_token)
    email = claims.get("email")
    if not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Google account has no email address"
        )

    user = users_crud.get_user_by_email(db, email)
    if not user:
        user = users_crud.create_user(db, {
            "name": claims.get("name") or email.split("@")[0],
            "email": email,
            "firebase_uid": claims.get("uid"),
            "role": _initial_role(email),
        })
        logger.info(f"Created user {user.id} from Google sign-in")
    elif _initial_role(email) == RoleType.ADMIN and user.role != RoleType.ADMIN:
        user = users_crud.set_user_role(db, user, RoleType.ADMIN)
        logger.info(f"Promoted user {user.id} to admin")

    return _auth_response(user, auth)

@router.get("/me", response_model=UserDisplay)
def me(current_user: dict = Depends(get_current_user)):
    return UserDisplay.model_validate(current_user["user"])
