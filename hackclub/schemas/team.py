from pydantic import BaseModel, Field, validator
from datetime import datetime
from typing import List, Optional

class TeamCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    event_id: int = Field(alias="eventId")
    project_idea: Optional[str] = Field(default=None, alias="projectIdea")

    @validator('name')
    def validate_name(cls, v):
        if not v or len(v.strip()) == 0:
            raise ValueError('Team name cannot be empty')
        return v.strip()

    class Config:
        populate_by_name = True

class TeamMember(BaseModel):
    id: int
    name: str

class TeamDisplay(BaseModel):
    id: int
    name: str
    event_id: int = Field(alias="eventId")
    event_title: Optional[str] = Field(default=None, alias="eventTitle")
    leader_id: int = Field(alias="leaderId")
    leader_name: Optional[str] = Field(default=None, alias="leaderName")
    members: List[TeamMember]
    project_idea: Optional[str] = Field(default=None, alias="projectIdea")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    class Config:
        populate_by_name = True

class TeamList(BaseModel):
    count: int
    data: List[TeamDisplay]
