# fathers_letter/schemas/__init__.py
"""
結構套件 - 只對外公開共用結構
"""

from .commons_schemas import BaseResponse, ErrorResponse, HealthResponse

# 其餘模組需要時直接 import
# from .letter_schemas import GenerateRequest, GenerationOutcome
# from .mailbox_schemas import MailboxCreateRequest, LetterRecord
