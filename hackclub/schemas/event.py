from pydantic import BaseModel, Field, validator
from datetime import datetime
from typing import List, Optional
from hackclub.models.event import EventType, EventStatus
from hackclub.utils.helpers import as_utc

class EventBase(BaseModel):
    title: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=500)
    date: datetime
    end_date: Optional[datetime] = Field(default=None, alias="endDate")
    image: str = "no-photo.jpg"
    type: EventType = EventType.TEAM
    status: EventStatus = EventStatus.UPCOMING

    @validator('title')
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip()

    @validator('date', 'end_date')
    def store_as_utc(cls, v):
        return as_utc(v)

    class Config:
        populate_by_name = True

class EventCreate(EventBase):
    pass

class EventUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, min_length=1, max_length=500)
    date: Optional[datetime] = None
    end_date: Optional[datetime] = Field(default=None, alias="endDate")
    image: Optional[str] = None
    type: Optional[EventType] = None
    status: Optional[EventStatus] = None

    @validator('title', 'description', 'date', 'type', 'status')
    def validate_required(cls, v):
        if v is None:
            raise ValueError('Field cannot be cleared')
        return v

    @validator('date', 'end_date')
    def store_as_utc(cls, v):
        return as_utc(v)

    class Config:
        populate_by_name = True

class EventDisplay(EventBase):
    id: int
    created_by: int = Field(alias="createdBy")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @validator('created_at')
    def attach_utc(cls, v):
        return as_utc(v)

    class Config:
        from_attributes = True
        populate_by_name = True

class EventList(BaseModel):
    count: int
    data: List[EventDisplay]
