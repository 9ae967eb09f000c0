# fathers_letter/services/mailbox_service.py
"""
信箱服務
單一 JSON 檔案 (陣列) 保存使用者收藏的信件，最多保留 500 筆
"""

from typing import Dict, List, Optional
from pathlib import Path
import json
import os
import secrets
import string
import tempfile
import threading
import time

from fathers_letter.config import settings
from fathers_letter.utils.logger import logger
from fathers_letter.utils.exceptions import MailboxWriteError
from fathers_letter.schemas.mailbox_schemas import LetterRecord

_ID_ALPHABET = string.digits + string.ascii_lowercase


def now_ms() -> int:
    return int(time.time() * 1000)


def generate_letter_id() -> str:
    """id = 1718000000000_k3x9ab 形式 (毫秒時間 + 6 碼亂數)"""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(6))
    return f"{now_ms()}_{suffix}"


def _created_at(record: Dict) -> float:
    value = record.get("createdAt")
    # 手動編輯過的檔案可能有非數字
    return value if isinstance(value, (int, float)) and not isinstance(value, bool) else 0


class MailboxService:
    def __init__(self, path: str, max_items: int = 500):
        self.path = Path(path)
        self.max_items = max_items
        # load → 修改 → 寫回 整段序列化
        self._lock = threading.Lock()

    def _ensure_file(self):
        # 排他建立: 已存在 (含其他執行緒剛寫入) 時不覆寫
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "x", encoding="utf-8") as f:
                f.write("[]")
        except FileExistsError:
            pass
        except OSError as e:
            logger.error(f" 初始化信箱檔案失敗: {self.path} ({e})")

    def load(self) -> List[Dict]:
        """
        讀取全部信件 (磁碟順序)
        檔案損毀 / 非陣列時回傳空清單，不拋出例外
        """
        self._ensure_file()
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw or "[]")
        except (OSError, ValueError) as e:
            logger.error(f" 讀取信箱檔案失敗: {self.path} ({e})")
            return []

        if not isinstance(data, list):
            logger.error(f" 信箱檔案格式錯誤 (非陣列): {self.path}")
            return []

        records = [item for item in data if isinstance(item, dict)]
        if len(records) != len(data):
            logger.warning(f" 略過 {len(data) - len(records)} 筆無效信件資料")
        return records

    def _save(self, records: List[Dict]):
        """暫存檔寫入後 rename，避免寫到一半的檔案"""
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=self.path.parent,
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
            ) as f:
                temp_path = Path(f.name)
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(temp_path, self.path)
        except OSError as e:
            if temp_path and temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass
            logger.error(f" 寫入信箱檔案失敗: {self.path} ({e})")
            raise MailboxWriteError("信箱寫入失敗", path=str(self.path)) from e

    def list(self) -> List[Dict]:
        """createdAt 由新到舊"""
        return sorted(self.load(), key=_created_at, reverse=True)

    def append(self, record: Dict) -> str:
        with self._lock:
            records = self.load()
            existing_ids = {r.get("id") for r in records}

            letter_id = generate_letter_id()
            while letter_id in existing_ids:
                letter_id = generate_letter_id()

            item = LetterRecord(
                id=letter_id,
                topic=record.get("topic"),
                text=record["text"],
                directions=record.get("directions"),
                verses=record.get("verses"),
                actions=record.get("actions"),
                createdAt=record.get("createdAt") or now_ms(),
            ).model_dump()
            records.insert(0, item)
            self._save(records[:self.max_items])

        logger.info(f" 信件保存完成: {letter_id}")
        return letter_id

    def remove(self, letter_id: str) -> int:
        """刪除指定 id (不存在也不算錯誤)，回傳刪除筆數"""
        with self._lock:
            records = self.load()
            remaining = [r for r in records if r.get("id") != letter_id]
            self._save(remaining)

        removed = len(records) - len(remaining)
        logger.info(f"🗑️ 信件刪除: {letter_id} ({removed}筆)")
        return removed


def create_mailbox_service(path: Optional[str] = None, max_items: Optional[int] = None) -> MailboxService:
    return MailboxService(
        path=path or settings.mailbox_path,
        max_items=max_items or settings.mailbox_max_items,
    )
