# fathers_letter/config.py
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import Optional

class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", extra="allow")

    # OpenAI (未設定時進入示範模式)
    openai_api_key: Optional[str] = None
    ai_model: str = "gpt-4o-mini"
    ai_temperature: float = 0.7
    ai_max_tokens: int = 1200
    openai_timeout: float = 60.0

    # 信箱
    mailbox_path: str = "mailbox.json"
    mailbox_max_items: int = 500

    # 提示詞 / 靜態資源
    base_prompt_path: str = "prompts/base_prompt.txt"
    favicon_path: str = "favicon.svg"
    static_dir: str = "public"

    # App Settings
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"

    @property
    def demo_mode(self) -> bool:
        return not self.openai_api_key

settings = Settings()
