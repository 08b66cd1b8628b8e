import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hackclub.core.security.auth import get_current_user
from hackclub.crud import events as events_crud
from hackclub.crud import teams as teams_crud
from hackclub.db.session import get_db
from hackclub.models.team import Team
from hackclub.schemas.team import TeamCreate, TeamDisplay, TeamList, TeamMember
from hackclub.utils.helpers import as_utc

logger = logging.getLogger("hackclub.teams")

router = APIRouter(prefix="/teams", tags=["teams"])

def team_to_display(team: Team) -> TeamDisplay:
    return TeamDisplay(
        id=team.id,
        name=team.name,
        event_id=team.event_id,
        event_title=team.event.title if team.event else None,
        leader_id=team.leader_id,
        leader_name=team.leader.name if team.leader else None,
        members=[TeamMember(id=member.id, name=member.name) for member in team.members],
        project_idea=team.project_idea,
        created_at=as_utc(team.created_at),
    )

@router.get("", response_model=TeamList)
def list_teams(db: Session = Depends(get_db)):
    teams = teams_crud.get_teams(db)
    return TeamList(count=len(teams), data=[team_to_display(team) for team in teams])

@router.post("", response_model=TeamDisplay, status_code=status.HTTP_201_CREATED)
def create_team(
    request: TeamCreate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    # Check if event exists
    if not events_crud.get_event(db, request.event_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No event found with that ID"
        )

    # Check if team name is unique
    if teams_crud.get_team_by_name(db, request.name):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Team name {request.name} already exists"
        )

    try:
        team = teams_crud.create_team(db, request.model_dump(), current_user["user"])
    except IntegrityError:
        # Another request took the name between the check and the insert
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Team name {request.name} already exists"
        )
    logger.info(f"Team {team.id} created for event {team.event_id} by user {team.leader_id}")
    return team_to_display(team)

@router.get("/myteams", response_model=TeamList)
def my_teams(
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    teams = teams_crud.get_user_teams(db, current_user["user"].id)
    return TeamList(count=len(teams), data=[team_to_display(team) for team in teams])

@router.put("/{team_id}/join", response_model=TeamDisplay)
def join_team(
    team_id: int,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    team = teams_crud.get_team(db, team_id)
    if not team:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Team not found"
        )

    user = current_user["user"]
    if user in team.members:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already in team"
        )

    team = teams_crud.add_team_member(db, team, user)
    logger.info(f"User {user.id} joined team {team.id}")
    return team_to_display(team)
