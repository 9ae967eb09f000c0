"""
Pytest fixtures

- 設定一律指向 tmp_path，並固定為示範模式 (環境變數的金鑰不影響測試)
"""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fathers_letter.config import Settings
from fathers_letter.main import create_app
from fathers_letter.services.mailbox_service import MailboxService


@pytest.fixture
def mailbox_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "mailbox.json"


@pytest.fixture
def base_prompt_path(tmp_path: Path) -> Path:
    path = tmp_path / "base_prompt.txt"
    path.write_text("你是一位慈愛的天父。\n", encoding="utf-8")
    return path


@pytest.fixture
def test_settings(tmp_path: Path, mailbox_path: Path, base_prompt_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        openai_api_key=None,
        mailbox_path=str(mailbox_path),
        base_prompt_path=str(base_prompt_path),
        favicon_path=str(tmp_path / "favicon.svg"),
        static_dir=str(tmp_path / "public"),
    )


@pytest.fixture
def mailbox(mailbox_path: Path) -> MailboxService:
    return MailboxService(str(mailbox_path))


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
