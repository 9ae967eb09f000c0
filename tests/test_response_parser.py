"""
test_response_parser.py - GPT 回應解析測試
"""

import pytest
from langchain_core.messages import AIMessage

from fathers_letter.chains.response_parser import LetterResponseParser


@pytest.fixture
def parser() -> LetterResponseParser:
    return LetterResponseParser()


class TestCodeFence:

    def test_json_fence_is_stripped(self, parser):
        assert parser('```json\n{"a":1}\n```') == {"a": 1}

    def test_plain_fence_is_stripped(self, parser):
        assert parser('```\n{"a": 1}\n```') == {"a": 1}

    def test_unfenced_json(self, parser):
        assert parser('{"salutation": "小明"}') == {"salutation": "小明"}

    def test_surrounding_whitespace(self, parser):
        assert parser('  \n```json\n{"a":1}\n```\n ') == {"a": 1}


class TestFallback:

    def test_not_json(self, parser):
        assert parser("not json at all") == {"letter": "not json at all"}

    def test_json_array_is_wrapped(self, parser):
        assert parser("[1, 2]") == {"letter": "[1, 2]"}

    def test_empty_content_is_empty_object(self, parser):
        assert parser("") == {}
        assert parser(None) == {}

    def test_fenced_garbage_keeps_inner_text(self, parser):
        assert parser("```json\n孩子，願平安\n```") == {"letter": "孩子，願平安"}


class TestInputs:

    def test_ai_message(self, parser):
        message = AIMessage(content='{"fullLetter": "永遠愛你的天父"}')

        assert parser(message) == {"fullLetter": "永遠愛你的天父"}

    def test_legacy_chinese_keys_are_mapped(self, parser):
        raw = '{"稱呼":"小明","完整信件":"信","三方向":"方向","兩經文":"經文","兩個行動呼籲":"行動","extra":1}'

        assert parser(raw) == {
            "salutation": "小明",
            "fullLetter": "信",
            "threeDirections": "方向",
            "twoVerses": "經文",
            "twoActions": "行動",
            "extra": 1,
        }

    def test_english_key_wins_over_legacy(self, parser):
        assert parser('{"salutation":"A","稱呼":"B"}') == {"salutation": "A"}
        assert parser('{"稱呼":"B","salutation":"A"}') == {"salutation": "A"}
