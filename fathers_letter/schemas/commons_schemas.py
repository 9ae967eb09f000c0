# fathers_letter/schemas/commons_schemas.py
"""
共用結構 - 所有 API 回應皆帶 ok 旗標
"""

from pydantic import BaseModel

# 基本回應
class BaseResponse(BaseModel):
    ok: bool = True

# 失敗回應
class ErrorResponse(BaseResponse):
    ok: bool = False
    error: str

class HealthResponse(BaseResponse):
    uptime: float
