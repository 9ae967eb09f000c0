# fathers_letter/api/letter.py

from typing import List, Optional

from fastapi import APIRouter, Body, HTTPException, Request
from fathers_letter.schemas.letter_schemas import GenerateRequest
from fathers_letter.prompts.letter_prompt import TOPICS
from fathers_letter.utils.exceptions import LetterGenerationError
from fathers_letter.utils.logger import logger

router = APIRouter(tags=["letter"])


@router.get("/topics", response_model=List[str])
async def list_topics():
    return list(TOPICS)


@router.post("/generate")
async def generate_letter(request: Request, payload: Optional[GenerateRequest] = Body(None)):
    """天父的信 生成"""
    payload = payload or GenerateRequest()
    letter_chain = request.app.state.letter_chain

    try:
        logger.info(f" 生成請求: topic={payload.topic}, demo={letter_chain.demo}")
        result = await letter_chain.generate(topic=payload.topic, nickname=payload.nickname)
    except LetterGenerationError as e:
        logger.error(f"❌ 生成 API 錯誤: {e}")
        raise HTTPException(status_code=500, detail="AI 生成失敗")

    body = {"ok": True, "data": result.data}
    if result.demo:
        body["demo"] = True
    return body
