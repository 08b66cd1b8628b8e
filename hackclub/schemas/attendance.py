from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from hackclub.models.attendance import AttendanceStatus

class AttendanceCreate(BaseModel):
    event_id: int = Field(alias="eventId")
    user_id: int = Field(alias="userId")
    status: AttendanceStatus = AttendanceStatus.PRESENT

    class Config:
        populate_by_name = True

class AttendanceDisplay(BaseModel):
    id: int
    event_id: int = Field(alias="eventId")
    user_id: int = Field(alias="userId")
    user_name: Optional[str] = Field(default=None, alias="userName")
    user_email: Optional[str] = Field(default=None, alias="userEmail")
    status: AttendanceStatus
    marked_at: Optional[datetime] = Field(default=None, alias="markedAt")

    class Config:
        populate_by_name = True
