"""Ошибки расчета трех талантов и пяти решеток"""
from typing import Iterable, List, Optional


class SancaiError(Exception):
    """Базовая ошибка движка"""


class InvalidInputError(SancaiError):
    """Пустое поле или не китайские символы во вводе"""

    EMPTY = 'empty'
    NON_CHINESE = 'non_chinese'
    TOO_LONG = 'too_long'

    FIELD_LABELS = {
        'surname': '姓氏',
        'given_name': '名字',
    }

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(self.message)

    @property
    def message(self) -> str:
        label = self.FIELD_LABELS.get(self.field, self.field)
        if self.reason == self.EMPTY:
            return f"请输入{label}！"
        if self.reason == self.TOO_LONG:
            return f"{label}最多只能包含两个汉字！"
        return f"{label}必须是中文字符！"


class UnresolvedCharacterError(SancaiError):
    """Символы, для которых в словаре нет пригодного числа черт"""

    def __init__(self, characters: Iterable[str]):
        # Каждый символ один раз, в порядке ввода
        self.characters: List[str] = list(dict.fromkeys(characters))
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"以下字符不是《通用规范汉字表》中的标准汉字：{'、'.join(self.characters)}"


class DictionaryUnavailableError(SancaiError):
    """Словарь черт не удалось загрузить"""

    def __init__(self, source: str, cause: Optional[str] = None):
        self.source = source
        self.cause = cause
        super().__init__(self.message)

    @property
    def message(self) -> str:
        text = f"字符数据库加载失败: {self.source}"
        if self.cause:
            text += f" ({self.cause})"
        return text
