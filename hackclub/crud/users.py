from sqlalchemy.orm import Session
from hackclub.models.user import User, RoleType

def get_user(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email.lower()).first()

def get_users(db: Session):
    return db.query(User).order_by(User.name.asc()).all()

def create_user(db: Session, user_data: dict):
    user_data = dict(user_data, email=user_data["email"].lower())
    user = User(**user_data)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

def set_user_role(db: Session, user: User, role: RoleType):
    user.role = role
    db.commit()
    db.refresh(user)
    return user
