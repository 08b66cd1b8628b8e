from hackclub.models.team import Team


def is_authorized_for_team(team: Team, user_id: int) -> bool:
    """True if the user leads the team or is one of its members"""
    if team.leader_id == user_id:
        return True
    return any(member.id == user_id for member in team.members)
