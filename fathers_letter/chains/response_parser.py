from typing import Any, Dict
import json
import re

from langchain_core.messages import AIMessage

from fathers_letter.utils.logger import logger

# 舊版提示詞使用的中文欄位 → 現行欄位
LEGACY_FIELD_MAP = {
    "稱呼": "salutation",
    "完整信件": "fullLetter",
    "三方向": "threeDirections",
    "兩經文": "twoVerses",
    "兩個行動呼籲": "twoActions",
    "兩個行動呼籱": "twoActions",
}

_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*([\s\S]*?)\s*```$")


class LetterResponseParser:
    """GPT 回應 → dict (解析失敗時包成 {"letter": 原文})"""

    FALLBACK_KEY = "letter"

    def __call__(self, text: Any) -> Dict[str, Any]:
        if isinstance(text, AIMessage):
            text = text.content
        if not isinstance(text, str):
            text = str(text) if text is not None else ""

        content = self.strip_code_fence(text.strip() or "{}")

        try:
            data = json.loads(content)
        except ValueError:
            logger.warning(f" JSON 解析失敗，改用原文: {content[:50]}...")
            return {self.FALLBACK_KEY: content}

        if not isinstance(data, dict):
            logger.warning(f" 回應不是 JSON 物件: {type(data).__name__}")
            return {self.FALLBACK_KEY: content}

        return self._canonical_keys(data)

    @staticmethod
    def strip_code_fence(text: str) -> str:
        match = _FENCE_PATTERN.match(text)
        return match.group(1) if match else text

    @staticmethod
    def _canonical_keys(data: Dict[str, Any]) -> Dict[str, Any]:
        result = {}
        for key, value in data.items():
            mapped = LEGACY_FIELD_MAP.get(key, key)
            # 已有英文欄位時不覆寫
            if mapped in result and mapped != key:
                continue
            result[mapped] = value
        return result


letter_response_parser = LetterResponseParser()
