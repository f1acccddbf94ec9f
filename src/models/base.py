# src/models/base.py
from datetime import datetime
import pytz
from pydantic import BaseModel, ConfigDict, Field

def utc_now() -> datetime:
    return datetime.now(pytz.utc)

class TimeStampedModel(BaseModel):
    """Base model with a creation timestamp"""
    timestamp: datetime = Field(default_factory=utc_now)
    
    model_config = ConfigDict(from_attributes=True)
