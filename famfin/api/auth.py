import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy import delete
from sqlmodel import Session, select

from famfin.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    get_current_user,
)
from famfin.database import get_session
from famfin.models import Budget, EssentialBill, Expense, FamilyMember, Income, Notification, User
from famfin.schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# children first so member references are gone before the members themselves
OWNED_MODELS = (Expense, Income, EssentialBill, Budget, Notification, FamilyMember)


@router.post("/register", response_model=UserRead)
def register(user_create: UserCreate, session: Session = Depends(get_session)):
    user_exists = session.exec(select(User).where(User.email == user_create.email)).first()
    if user_exists:
        raise HTTPException(status_code=400, detail="Email already registered")

    user = User(
        email=user_create.email,
        hashed_password=get_password_hash(user_create.password),
        display_name=user_create.display_name,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return UserRead(id=user.id, email=user.email, display_name=user.display_name)


@router.post("/login")
def login(form_data: OAuth2PasswordRequestForm = Depends(), session: Session = Depends(get_session)):
    user = session.exec(select(User).where(User.email == form_data.username)).first()
    if not user or not verify_password(form_data.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    access_token = create_access_token(data={"sub": str(user.id)})
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=UserRead)
def read_users_me(user_id: UUID = Depends(get_current_user), session: Session = Depends(get_session)):
    user = session.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserRead(id=user.id, email=user.email, display_name=user.display_name)


@router.put("/me", response_model=UserRead)
def update_users_me(
    user_update: UserUpdate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    user = session.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    # a blank name falls back to "You" in the feed and leaderboard
    user.display_name = (user_update.display_name or "").strip() or None
    session.add(user)
    session.commit()
    session.refresh(user)
    return UserRead(id=user.id, email=user.email, display_name=user.display_name)


@router.delete("/me")
def delete_account(user_id: UUID = Depends(get_current_user), session: Session = Depends(get_session)):
    """Deletes every row the account owns and then the account itself."""
    user = session.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    for model in OWNED_MODELS:
        session.exec(delete(model).where(model.user_id == user_id))
    session.delete(user)
    session.commit()

    logger.info("Deleted account %s", user_id)
    return {"message": "User deleted successfully."}
