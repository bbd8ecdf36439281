"""Определение числа черт символа"""
import logging
from typing import Union

from .dictionary import CharacterDictionary
from .models import ResolvedCharacter, Unresolved

logger = logging.getLogger(__name__)

# Черты Канси - основной источник для нумерологии, порядок не настраивается
STROKE_PRECEDENCE = ('kangxi', 'traditional', 'simplified')


class StrokeResolver:
    """Выбирает число черт по фиксированному порядку источников"""

    def __init__(self, dictionary: CharacterDictionary):
        self.dictionary = dictionary

    def resolve(self, char: str) -> Union[ResolvedCharacter, Unresolved]:
        record = self.dictionary.lookup(char)

        # Запись должна принадлежать именно этому символу
        if record is None or record.char != char:
            logger.warning(f"Символ '{char}' не найден в словаре")
            return Unresolved(char=char)

        for source in STROKE_PRECEDENCE:
            strokes = getattr(record.strokes, source)
            if strokes is not None and strokes > 0:
                return ResolvedCharacter(char=char, strokes=strokes, source=source)

        logger.warning(f"У символа '{char}' нет пригодного числа черт")
        return Unresolved(char=char)
