from pydantic import BaseModel, Field, HttpUrl, validator
from datetime import datetime
from typing import Any, Dict, List, Optional
from hackclub.models.submission import SubmissionStatus

class Attachment(BaseModel):
    """A file the client already uploaded to the media host"""
    name: str = Field(min_length=1)
    url: HttpUrl
    # Free-form tag such as "image", "pdf" or "zip"
    type: Optional[str] = Field(default=None, max_length=20)

    @validator('type')
    def normalize_type(cls, v):
        if v is None:
            return v
        return v.strip().lstrip('.').lower() or None

class SubmissionCreate(BaseModel):
    event_id: int = Field(alias="eventId")
    team_id: int = Field(alias="teamId")
    project_title: str = Field(alias="projectTitle", min_length=1, max_length=200)
    description: str = Field(min_length=1)
    repo_link: HttpUrl = Field(alias="repoLink")
    demo_link: Optional[HttpUrl] = Field(default=None, alias="demoLink")
    attachments: List[Attachment] = []

    class Config:
        populate_by_name = True

class SubmissionUpdate(BaseModel):
    """
    Partial update of a submission.

    Only fields present in the request are applied. An explicit null clears
    the demo link or the attachments; the other fields cannot be cleared.
    """
    project_title: Optional[str] = Field(default=None, alias="projectTitle", min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    repo_link: Optional[HttpUrl] = Field(default=None, alias="repoLink")
    demo_link: Optional[HttpUrl] = Field(default=None, alias="demoLink")
    attachments: Optional[List[Attachment]] = None

    @validator('project_title', 'description', 'repo_link')
    def validate_required(cls, v):
        if v is None:
            raise ValueError('Field cannot be cleared')
        return v

    class Config:
        populate_by_name = True

    def changes(self) -> Dict[str, Any]:
        """Fields the client sent, as plain values ready to store"""
        changes = self.model_dump(exclude_unset=True, mode="json")
        if "attachments" in changes and changes["attachments"] is None:
            changes["attachments"] = []
        return changes

class GradeRequest(BaseModel):
    score: float
    feedback: Optional[str] = None

class GradeDisplay(BaseModel):
    score: float
    feedback: Optional[str] = None
    graded_by: Optional[int] = Field(default=None, alias="gradedBy")
    graded_at: Optional[datetime] = Field(default=None, alias="gradedAt")

    class Config:
        populate_by_name = True

class SubmissionDisplay(BaseModel):
    id: int
    event_id: int = Field(alias="eventId")
    team_id: int = Field(alias="teamId")
    team_name: Optional[str] = Field(default=None, alias="teamName")
    project_title: str = Field(alias="projectTitle")
    description: str
    repo_link: str = Field(alias="repoLink")
    demo_link: Optional[str] = Field(default=None, alias="demoLink")
    attachments: List[Dict[str, Any]] = []
    status: SubmissionStatus
    submitted_by: int = Field(alias="submittedBy")
    submitter_name: Optional[str] = Field(default=None, alias="submitterName")
    grade: Optional[GradeDisplay] = None
    submitted_at: Optional[datetime] = Field(default=None, alias="submittedAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        populate_by_name = True
