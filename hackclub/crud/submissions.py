from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload
from hackclub.models.submission import Submission

def find_submission(db: Session, event_id: int, team_id: int):
    return (
        db.query(Submission)
        .filter(Submission.event_id == event_id, Submission.team_id == team_id)
        .first()
    )

def find_submission_by_id(db: Session, submission_id: int):
    return db.query(Submission).filter(Submission.id == submission_id).first()

def insert_submission(db: Session, submission_data: dict):
    submission = Submission(**submission_data)
    db.add(submission)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(submission)
    return submission

def save_submission(db: Session, submission: Submission):
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(submission)
    return submission

def list_submissions_by_event(db: Session, event_id: int):
    """Submissions of an event with team and submitter loaded, newest first"""
    return (
        db.query(Submission)
        .options(joinedload(Submission.team), joinedload(Submission.submitter))
        .filter(Submission.event_id == event_id)
        .order_by(Submission.submitted_at.desc(), Submission.id.desc())
        .all()
    )
