# fathers_letter/schemas/letter_schemas.py

from typing import Any, Dict, Optional
from pydantic import BaseModel


# 生成請求
class GenerateRequest(BaseModel):
    topic: Optional[str] = None
    nickname: Optional[str] = None


# 內部結果 (chain → API)
class GenerationOutcome(BaseModel):
    data: Dict[str, Any]
    demo: bool = False
