"""Project submission lifecycle for team events.

A team has at most one submission per event. States:
    NONE -> SUBMITTED (create) -> GRADED (grade)
Edits keep the submission SUBMITTED and are allowed only to the submitter or
the team leader, before the event end date and before a score is recorded.
Grading may be repeated; the latest grade replaces the previous one.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hackclub.core.errors import (
    AlreadyGraded,
    Conflict,
    DeadlinePassed,
    Forbidden,
    InvalidScore,
    NotFound,
    ValidationError,
)
from hackclub.crud import events as events_crud
from hackclub.crud import submissions as submissions_crud
from hackclub.crud import teams as teams_crud
from hackclub.models.submission import Submission, SubmissionStatus
from hackclub.models.user import User
from hackclub.schemas.submission import SubmissionCreate, SubmissionUpdate
from hackclub.services.deadline import is_submission_window_open
from hackclub.services.membership import is_authorized_for_team
from hackclub.utils.helpers import get_utc_now

logger = logging.getLogger("hackclub.submissions")

MIN_SCORE = 0
MAX_SCORE = 100


def _ensure_window_open(db: Session, event_id: int):
    event = events_crud.get_event(db, event_id)
    if not event:
        raise NotFound("Event not found")
    if not is_submission_window_open(event):
        raise DeadlinePassed("Submission deadline has passed")
    return event


def create_submission(db: Session, payload: SubmissionCreate, user: User) -> Submission:
    """
    Record a team's project for an event

    Raises:
        NotFound: team or event does not exist
        Forbidden: user is neither leader nor member of the team
        Conflict: the team already submitted for this event
        DeadlinePassed: the event end date is behind us
    """
    team = teams_crud.get_team(db, payload.team_id)
    if not team:
        raise NotFound("Team not found")

    if not is_authorized_for_team(team, user.id):
        raise Forbidden("Not authorized to submit for this team")

    if submissions_crud.find_submission(db, payload.event_id, payload.team_id):
        raise Conflict("Team has already submitted a project")

    _ensure_window_open(db, payload.event_id)

    now = get_utc_now()
    try:
        submission = submissions_crud.insert_submission(db, {
            "event_id": payload.event_id,
            "team_id": payload.team_id,
            "project_title": payload.project_title,
            "description": payload.description,
            "repo_link": str(payload.repo_link),
            "demo_link": str(payload.demo_link) if payload.demo_link else None,
            "attachments": [attachment.model_dump(mode="json") for attachment in payload.attachments],
            "status": SubmissionStatus.SUBMITTED,
            "submitted_by": user.id,
            "submitted_at": now,
            "updated_at": now,
        })
    except IntegrityError:
        # Lost a race with a concurrent submission from the same team
        raise Conflict("Team has already submitted a project")

    logger.info(
        "Submission %s created for team %s in event %s by user %s",
        submission.id, submission.team_id, submission.event_id, user.id,
    )
    return submission


def update_submission(
    db: Session, submission_id: int, patch: SubmissionUpdate, user: User
) -> Submission:
    """
    Apply the fields present in ``patch`` to a submission

    Raises:
        NotFound: submission does not exist
        Forbidden: user is neither the submitter nor the team leader
        DeadlinePassed: the event end date is behind us
        AlreadyGraded: a score has been recorded
    """
    submission = submissions_crud.find_submission_by_id(db, submission_id)
    if not submission:
        raise NotFound("Submission not found")

    team = teams_crud.get_team(db, submission.team_id)
    is_leader = team is not None and team.leader_id == user.id
    is_submitter = submission.submitted_by == user.id
    if not (is_submitter or is_leader):
        raise Forbidden("Not authorized to update this submission")

    _ensure_window_open(db, submission.event_id)

    if submission.is_graded:
        raise AlreadyGraded("Cannot update a graded submission")

    changes = patch.changes()
    for field, value in changes.items():
        setattr(submission, field, value)
    submission.updated_at = get_utc_now()

    submission = submissions_crud.save_submission(db, submission)
    logger.info(
        "Submission %s updated by user %s (fields: %s)",
        submission.id, user.id, ", ".join(sorted(changes)) or "none",
    )
    return submission


def grade_submission(
    db: Session, submission_id: int, score: float, feedback: Optional[str], grader: User
) -> Submission:
    """
    Set or replace the grade of a submission

    The caller is responsible for checking that ``grader`` may grade.

    Raises:
        NotFound: submission does not exist
        InvalidScore: score outside 0..100
        ValidationError: feedback missing or blank
    """
    submission = submissions_crud.find_submission_by_id(db, submission_id)
    if not submission:
        raise NotFound("Submission not found")

    if score is None or not (MIN_SCORE <= score <= MAX_SCORE):
        raise InvalidScore(f"Score must be between {MIN_SCORE} and {MAX_SCORE}")

    if feedback is None or not feedback.strip():
        raise ValidationError("Feedback is required")

    previous_score = submission.grade_score
    submission.grade_score = score
    submission.grade_feedback = feedback.strip()
    submission.graded_by = grader.id
    submission.graded_at = get_utc_now()
    submission.status = SubmissionStatus.GRADED

    submission = submissions_crud.save_submission(db, submission)
    if previous_score is None:
        logger.info("Submission %s graded %s by user %s", submission.id, score, grader.id)
    else:
        logger.info(
            "Submission %s regraded from %s to %s by user %s",
            submission.id, previous_score, score, grader.id,
        )
    return submission


def list_submissions_by_event(db: Session, event_id: int) -> List[Submission]:
    return submissions_crud.list_submissions_by_event(db, event_id)
