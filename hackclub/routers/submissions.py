from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from hackclub.core.security.auth import get_current_user
from hackclub.core.security.permissions import Capability, require_capability
from hackclub.db.session import get_db
from hackclub.models.submission import Submission
from hackclub.schemas.submission import (
    GradeDisplay,
    GradeRequest,
    SubmissionCreate,
    SubmissionDisplay,
    SubmissionUpdate,
)
from hackclub.services import submissions as submission_service
from hackclub.utils.helpers import as_utc

router = APIRouter(prefix="/submissions", tags=["submissions"])

def submission_to_display(submission: Submission) -> SubmissionDisplay:
    grade = None
    if submission.grade_score is not None:
        grade = GradeDisplay(
            score=submission.grade_score,
            feedback=submission.grade_feedback,
            graded_by=submission.graded_by,
            graded_at=as_utc(submission.graded_at),
        )

    return SubmissionDisplay(
        id=submission.id,
        event_id=submission.event_id,
        team_id=submission.team_id,
        team_name=submission.team.name if submission.team else None,
        project_title=submission.project_title,
        description=submission.description,
        repo_link=submission.repo_link,
        demo_link=submission.demo_link,
        attachments=submission.attachments or [],
        status=submission.status,
        submitted_by=submission.submitted_by,
        submitter_name=submission.submitter.name if submission.submitter else None,
        grade=grade,
        submitted_at=as_utc(submission.submitted_at),
        updated_at=as_utc(submission.updated_at),
    )

@router.post("", response_model=SubmissionDisplay, status_code=status.HTTP_201_CREATED)
def create_submission(
    request: SubmissionCreate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    submission = submission_service.create_submission(db, request, current_user["user"])
    return submission_to_display(submission)

@router.put("/{submission_id}", response_model=SubmissionDisplay)
def update_submission(
    submission_id: int,
    request: SubmissionUpdate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    submission = submission_service.update_submission(db, submission_id, request, current_user["user"])
    return submission_to_display(submission)

@router.get("/event/{event_id}", response_model=List[SubmissionDisplay])
def get_event_submissions(
    event_id: int,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    submissions = submission_service.list_submissions_by_event(db, event_id)
    return [submission_to_display(submission) for submission in submissions]

@router.post("/{submission_id}/grade", response_model=SubmissionDisplay)
def grade_submission(
    submission_id: int,
    request: GradeRequest,
    current_user: dict = Depends(require_capability(Capability.GRADE_SUBMISSION)),
    db: Session = Depends(get_db)
):
    submission = submission_service.grade_submission(
        db, submission_id, request.score, request.feedback, current_user["user"]
    )
    return submission_to_display(submission)
