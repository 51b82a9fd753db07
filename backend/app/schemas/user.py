from pydantic import BaseModel
from typing import Optional


class ApplicantSummary(BaseModel):
    id: str
    username: str
    avatar_url: Optional[str] = None

    class Config:
        from_attributes = True


class ApplicantDetail(ApplicantSummary):
    bio: Optional[str] = None
