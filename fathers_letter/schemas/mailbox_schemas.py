# fathers_letter/schemas/mailbox_schemas.py
"""
信箱相關結構
"""

from pydantic import BaseModel
from typing import List, Optional
from .commons_schemas import BaseResponse

class MailboxCreateRequest(BaseModel):
    topic: Optional[str] = None
    text: Optional[str] = None
    directions: Optional[str] = None
    verses: Optional[str] = None
    actions: Optional[str] = None
    createdAt: Optional[int] = None

class LetterRecord(BaseModel):
    id: str
    topic: Optional[str] = None
    text: str
    directions: Optional[str] = None
    verses: Optional[str] = None
    actions: Optional[str] = None
    createdAt: int

class MailboxListResponse(BaseResponse):
    list: List[dict]

class MailboxCreateResponse(BaseResponse):
    id: str
