# fathers_letter/api/mailbox.py
"""
信箱 API: 列出 / 保存 / 刪除
"""

from typing import Optional

from fastapi import APIRouter, Body, HTTPException, Request

from fathers_letter.schemas.commons_schemas import BaseResponse
from fathers_letter.schemas.mailbox_schemas import (
    MailboxCreateRequest,
    MailboxCreateResponse,
    MailboxListResponse,
)
from fathers_letter.utils.exceptions import MailboxWriteError
from fathers_letter.utils.logger import logger

router = APIRouter(tags=["mailbox"])


@router.get("/mailbox", response_model=MailboxListResponse)
def list_mailbox(request: Request):
    mailbox = request.app.state.mailbox
    return MailboxListResponse(list=mailbox.list())


@router.post("/mailbox", response_model=MailboxCreateResponse)
def save_letter(request: Request, payload: Optional[MailboxCreateRequest] = Body(None)):
    if payload is None or not (payload.text or "").strip():
        raise HTTPException(status_code=400, detail="缺少文字內容")

    mailbox = request.app.state.mailbox
    try:
        letter_id = mailbox.append(payload.model_dump())
    except MailboxWriteError as e:
        logger.error(f" 信件保存失敗: {e}")
        raise HTTPException(status_code=500, detail="信件保存失敗")

    return MailboxCreateResponse(id=letter_id)


@router.delete("/mailbox/{letter_id}", response_model=BaseResponse)
def delete_letter(request: Request, letter_id: str):
    """不存在的 id 也回傳 ok"""
    mailbox = request.app.state.mailbox
    try:
        mailbox.remove(letter_id)
    except MailboxWriteError as e:
        # 刪除保持冪等回應，失敗只記錄
        logger.error(f" 信件刪除寫入失敗: {letter_id} ({e})")
    return BaseResponse()
