from typing import Optional

from langchain_core.messages import HumanMessage
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI

from fathers_letter.config import Settings, settings as default_settings
from fathers_letter.utils.logger import logger
from fathers_letter.utils.exceptions import LetterGenerationError
from fathers_letter.schemas.letter_schemas import GenerationOutcome
from fathers_letter.chains.response_parser import letter_response_parser
from fathers_letter.prompts.letter_prompt import (
    DEFAULT_NICKNAME,
    DEFAULT_TOPIC,
    build_letter_prompt,
    read_base_prompt,
)


def _resolve(topic: Optional[str], nickname: Optional[str]):
    return (topic or DEFAULT_TOPIC), (nickname or DEFAULT_NICKNAME)


class LetterChain:
    """OpenAI 實際生成 (金鑰存在時)"""

    demo = False

    def __init__(self, llm: Runnable, base_prompt_path: Optional[str] = None):
        self.llm = llm
        self.base_prompt_path = base_prompt_path
        self.parser = letter_response_parser

    async def generate(self, topic: Optional[str] = None, nickname: Optional[str] = None) -> GenerationOutcome:
        topic, nickname = _resolve(topic, nickname)
        prompt = build_letter_prompt(
            topic=topic,
            nickname=nickname,
            base_prompt=read_base_prompt(self.base_prompt_path),
        )

        try:
            ai_response = await self.llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(f" 信件生成失敗: {e}")
            raise LetterGenerationError("AI 生成失敗", topic=topic) from e

        data = self.parser(ai_response)
        logger.info(f" 信件生成完成 - 主題: {topic} | 欄位: {', '.join(data.keys())}")
        return GenerationOutcome(data=data)


class DemoLetterChain:
    """無金鑰時的示範輸出，不連網、不會失敗"""

    demo = True

    async def generate(self, topic: Optional[str] = None, nickname: Optional[str] = None) -> GenerationOutcome:
        topic, nickname = _resolve(topic, nickname)
        data = {
            "salutation": nickname,
            "fullLetter": (
                f"{nickname}，願平安充滿你心。在{topic}的路上，我看見你的掙扎與盼望。"
                "今天先安慰你現在的心，記得我與你同在；也把眼目抬起看見未來的亮光；"
                "更要堅定信心的根基在我的話語上。正如腓立比書4:7與詩篇23:1提醒你："
                "我必看顧你，使你心思意念得安息。先用三分鐘安靜呼吸、向我傾心；"
                "然後寫下兩件感恩的事並與家人分享。永遠愛你的天父。"
            ),
            "threeDirections": "安慰現在、盼望未來、堅定根基",
            "twoVerses": "腓立比書4:7；詩篇23:1",
            "twoActions": "禱告：安靜三分鐘向神訴說；感恩：寫下兩件並分享",
        }
        return GenerationOutcome(data=data, demo=True)


def create_letter_chain(config: Optional[Settings] = None):
    """啟動時決定一次: 金鑰存在 → LetterChain，否則 DemoLetterChain"""
    config = config or default_settings

    if config.demo_mode:
        logger.warning(" OPENAI_API_KEY 未設定 - 示範模式啟動")
        return DemoLetterChain()

    llm = ChatOpenAI(
        model=config.ai_model,
        temperature=config.ai_temperature,
        max_tokens=config.ai_max_tokens,
        timeout=config.openai_timeout,
        max_retries=0,
        openai_api_key=config.openai_api_key,
    ).bind(response_format={"type": "json_object"})

    logger.info(f" OpenAI 模式啟動 - model={config.ai_model}")
    return LetterChain(llm=llm, base_prompt_path=config.base_prompt_path)
