from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload
from hackclub.models.team import Team
from hackclub.models.user import User

def get_team(db: Session, team_id: int):
    return db.query(Team).filter(Team.id == team_id).first()

def get_team_by_name(db: Session, name: str):
    return db.query(Team).filter(Team.name == name).first()

def get_teams(db: Session):
    return (
        db.query(Team)
        .options(joinedload(Team.event), joinedload(Team.leader), joinedload(Team.members))
        .order_by(Team.created_at.desc(), Team.id.desc())
        .all()
    )

def get_user_teams(db: Session, user_id: int):
    """Teams the user leads or belongs to"""
    return (
        db.query(Team)
        .options(joinedload(Team.event), joinedload(Team.leader), joinedload(Team.members))
        .filter(or_(Team.leader_id == user_id, Team.members.any(User.id == user_id)))
        .order_by(Team.created_at.desc(), Team.id.desc())
        .all()
    )

def create_team(db: Session, team_data: dict, leader: User):
    # The leader is also the first member
    team = Team(**team_data, leader_id=leader.id)
    team.members.append(leader)
    db.add(team)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(team)
    return team

def add_team_member(db: Session, team: Team, user: User):
    team.members.append(user)
    db.commit()
    db.refresh(team)
    return team
