# fathers_letter/prompts/letter_prompt.py
"""
天父的信 提示詞模板
"""

from pathlib import Path
from typing import Optional, Union

from fathers_letter.utils.logger import logger


DEFAULT_TOPIC = "信心 / 盼望"
DEFAULT_NICKNAME = "親愛的孩子"

# 固定主題目錄 (順序不可變)
TOPICS = [
    "工作 / 職場",
    "家庭 / 關係",
    "壓力 / 焦慮",
    "病痛 / 醫治",
    "供應 / 需要",
    "饒恕 / 和好",
    "方向 / 抉擇",
    "信心 / 盼望",
    "平安 / 安息",
    "感恩 / 敬拜",
]

# 輸出欄位: JSON 鍵 → 說明
LETTER_FIELDS = {
    "salutation": "稱呼",
    "fullLetter": "一氣呵成的全信文字（含開頭問安、主要內容、三方向、兩經文、兩個行動呼籲與結尾）",
    "threeDirections": "三個方向",
    "twoVerses": "經文1: [引用+標註]；經文2: [引用+標註]",
    "twoActions": "第一行動：簡短實踐（1-2句）；第二行動：簡短實踐（1-2句）",
}


class LetterPrompts:
    """信件相關提示詞"""

    FALLBACK_BASE_PROMPT = "請依照主題生成多維度卡片內容，並遵守下方的輸出格式要求。"

    JSON_FORMAT_DIRECTIVE = (
        "務必只輸出純 JSON 格式，前後不要加上 ```json 或 ``` 或任意文字。"
        "務必輸出為 JSON 物件，欄位：{fields}，不要輸出多餘文字。"
    )

    LETTER_REQUEST = """{base_prompt}

主題：{topic}
稱呼：{nickname}

{format_directive}"""


def _format_directive() -> str:
    fields = ",".join(f'"{key}":"{desc}"' for key, desc in LETTER_FIELDS.items())
    return LetterPrompts.JSON_FORMAT_DIRECTIVE.format(fields="{" + fields + "}")


def read_base_prompt(path: Optional[Union[str, Path]]) -> str:
    """
    外部基底提示詞讀取 (每次請求讀取，檔案可隨時更新)
    檔案不存在或讀取失敗時回傳內建提示詞
    """
    if path:
        prompt_path = Path(path)
        try:
            if prompt_path.exists():
                text = prompt_path.read_text(encoding="utf-8").strip()
                if text:
                    return text
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f" 讀取基底提示詞失敗: {prompt_path} ({e})")
    return LetterPrompts.FALLBACK_BASE_PROMPT


def build_letter_prompt(topic: str, nickname: str, base_prompt: str) -> str:
    """基底提示詞 + 主題 + 稱呼 + JSON 輸出規則"""
    return LetterPrompts.LETTER_REQUEST.format(
        base_prompt=base_prompt,
        topic=topic,
        nickname=nickname,
        format_directive=_format_directive(),
    )
