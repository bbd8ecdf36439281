"""Общие фикстуры тестов"""
import pytest

from sancai_calculator import CharacterDictionary, CharacterRecord

DICTIONARY_PAYLOAD = {
    "meta": {"version": "1.0", "totalCharacters": 9},
    "statistics": {"totalCharacters": 9},
    "data": {
        "王": {"char": "王", "strokes": {"kangxi": 4, "traditional": 4, "simplified": 4}},
        "浩": {"char": "浩", "strokes": {"kangxi": 11, "traditional": 10, "simplified": 10}},
        "然": {"char": "然", "strokes": {"kangxi": 12, "simplified": 12}},
        "欧": {"char": "欧", "strokes": {"kangxi": 15, "traditional": 15, "simplified": 8}},
        "阳": {"char": "阳", "strokes": {"kangxi": 17, "traditional": 17, "simplified": 6}},
        "李": {"char": "李", "strokes": {"simplified": 7}},
        "华": {"char": "华", "strokes": {"kangxi": 0, "traditional": 14, "simplified": 6}},
        # Пустая запись: нет ни одного положительного числа черт
        "丁": {"char": "丁", "strokes": {"kangxi": 0, "simplified": 0}},
        # Запись-заглушка с чужим символом
        "甲": {"char": "乙", "strokes": {"kangxi": 5}},
    },
}


class CountingDictionary(CharacterDictionary):
    """Словарь, считающий обращения"""

    def __init__(self, records):
        super().__init__(records)
        self.lookups = 0

    def lookup(self, char):
        self.lookups += 1
        return super().lookup(char)


@pytest.fixture
def dictionary():
    return CharacterDictionary.from_payload(DICTIONARY_PAYLOAD)


@pytest.fixture
def counting_dictionary():
    records = {
        key: CharacterRecord.model_validate(value)
        for key, value in DICTIONARY_PAYLOAD["data"].items()
    }
    return CountingDictionary(records)
