"""
test_letter_chain.py - 生成流程測試

- 示範模式: 不連網、結果固定
- OpenAI 模式: 假 LLM 取代 ChatOpenAI
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from langchain_core.language_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage

from fathers_letter.chains.letter_chain import DemoLetterChain, LetterChain, create_letter_chain
from fathers_letter.config import Settings
from fathers_letter.prompts.letter_prompt import DEFAULT_NICKNAME, DEFAULT_TOPIC
from fathers_letter.utils.exceptions import LetterGenerationError


class TestDemoLetterChain:

    @pytest.mark.asyncio
    async def test_uses_nickname_and_topic(self):
        result = await DemoLetterChain().generate(topic="平安 / 安息", nickname="小明")

        assert result.demo is True
        assert result.data["salutation"] == "小明"
        assert "平安 / 安息" in result.data["fullLetter"]
        assert all(isinstance(v, str) and v for v in result.data.values())

    @pytest.mark.asyncio
    async def test_deterministic(self):
        chain = DemoLetterChain()

        first = await chain.generate(topic="平安 / 安息", nickname="小明")
        second = await chain.generate(topic="平安 / 安息", nickname="小明")

        assert first == second

    @pytest.mark.asyncio
    async def test_defaults(self):
        result = await DemoLetterChain().generate()

        assert result.data["salutation"] == DEFAULT_NICKNAME
        assert DEFAULT_TOPIC in result.data["fullLetter"]


class TestLetterChain:

    @pytest.mark.asyncio
    async def test_sends_single_prompt_and_parses(self, base_prompt_path: Path):
        llm = AsyncMock()
        llm.ainvoke.return_value = AIMessage(content='```json\n{"salutation": "小明"}\n```')
        chain = LetterChain(llm=llm, base_prompt_path=str(base_prompt_path))

        result = await chain.generate(topic="平安 / 安息", nickname="小明")

        assert result.demo is False
        assert result.data == {"salutation": "小明"}

        messages = llm.ainvoke.await_args.args[0]
        assert len(messages) == 1
        assert isinstance(messages[0], HumanMessage)
        assert messages[0].content.startswith("你是一位慈愛的天父。")
        assert "主題：平安 / 安息" in messages[0].content

    @pytest.mark.asyncio
    async def test_non_json_answer_is_wrapped(self, base_prompt_path: Path):
        llm = FakeListChatModel(responses=["孩子，願平安充滿你心。"])
        chain = LetterChain(llm=llm, base_prompt_path=str(base_prompt_path))

        result = await chain.generate()

        assert result.data == {"letter": "孩子，願平安充滿你心。"}

    @pytest.mark.asyncio
    async def test_provider_error_raises_generation_error(self, base_prompt_path: Path):
        llm = AsyncMock()
        llm.ainvoke.side_effect = TimeoutError("request timed out")
        chain = LetterChain(llm=llm, base_prompt_path=str(base_prompt_path))

        with pytest.raises(LetterGenerationError):
            await chain.generate(topic="平安 / 安息")

        assert llm.ainvoke.await_count == 1

    @pytest.mark.asyncio
    async def test_missing_base_prompt_still_generates(self, tmp_path: Path):
        llm = AsyncMock()
        llm.ainvoke.return_value = AIMessage(content="{}")
        chain = LetterChain(llm=llm, base_prompt_path=str(tmp_path / "missing.txt"))

        result = await chain.generate()

        assert result.data == {}
        assert "主題：" + DEFAULT_TOPIC in llm.ainvoke.await_args.args[0][0].content


class TestCreateLetterChain:

    def test_without_key_is_demo(self, test_settings: Settings):
        assert isinstance(create_letter_chain(test_settings), DemoLetterChain)

    def test_with_key_is_live(self, test_settings: Settings):
        config = test_settings.model_copy(update={"openai_api_key": "sk-test"})

        chain = create_letter_chain(config)

        assert isinstance(chain, LetterChain)
        assert chain.demo is False
        assert chain.base_prompt_path == test_settings.base_prompt_path


def test_chain_uses_shared_parser(base_prompt_path: Path):
    from fathers_letter.chains.response_parser import letter_response_parser

    chain = LetterChain(llm=AsyncMock(), base_prompt_path=str(base_prompt_path))

    assert chain.parser is letter_response_parser
