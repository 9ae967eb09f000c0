# fathers_letter/utils/exceptions.py
"""
服務共用例外
"""


class LetterServiceError(Exception):
    """服務層錯誤的共同基底"""

    def __init__(self, message: str, **context):
        self.message = message
        self.context = context
        super().__init__(message)


class MailboxWriteError(LetterServiceError):
    """信箱檔案寫入失敗"""
    pass


class LetterGenerationError(LetterServiceError):
    """AI 生成失敗 (網路 / 認證 / 逾時 ...)"""
    pass
