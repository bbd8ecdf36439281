"""Калькулятор трех талантов и пяти решеток"""
import logging
from typing import List, Optional

from .dictionary import CharacterDictionary
from .elements import assign_elements, compose_sancai
from .errors import InvalidInputError, UnresolvedCharacterError
from .models import (
    EngineError, EngineResult, ErrorKind, GridSet, NameInput, ResolvedCharacter, Unresolved
)
from .resolver import StrokeResolver
from .validator import validate_name

logger = logging.getLogger(__name__)


def calculate_grids(surname_strokes: int, first_strokes: int,
                    second_strokes: Optional[int] = None) -> GridSet:
    """
    Пять решеток по числам черт

    heaven = S + 1
    human  = S + G1
    earth  = G1 + G2, а для одиночного имени G1 + 1
    total  = S + G1 + G2 (G2 = 0, если второго знака нет)
    outer  = total - human + 1
    """
    second = second_strokes or 0
    heaven = surname_strokes + 1
    human = surname_strokes + first_strokes
    earth = first_strokes + second_strokes if second_strokes is not None else first_strokes + 1
    total = surname_strokes + first_strokes + second
    outer = total - human + 1

    return GridSet(heaven=heaven, human=human, earth=earth, total=total, outer=outer)


class SancaiCalculator:
    """Класс для расчета трех талантов и пяти решеток"""

    def __init__(self, dictionary: CharacterDictionary):
        self.dictionary = dictionary
        self.resolver = StrokeResolver(dictionary)

    def calculate(self, surname: str, given_name: str) -> EngineResult:
        """Основной метод расчета; ошибки ввода возвращаются как значение"""
        try:
            name = validate_name(surname, given_name)
        except InvalidInputError as e:
            return EngineResult(
                success=False,
                surname=surname,
                given_name=given_name,
                error=EngineError(
                    kind=ErrorKind.INVALID_INPUT,
                    message=e.message,
                    field=e.field,
                    reason=e.reason,
                ),
            )

        try:
            return self._calculate(name)
        except UnresolvedCharacterError as e:
            return EngineResult(
                success=False,
                surname=surname,
                given_name=given_name,
                error=EngineError(
                    kind=ErrorKind.UNRESOLVED_CHARACTER,
                    message=e.message,
                    invalid_characters=e.characters,
                ),
            )

    def resolve_characters(self, text: str) -> List[ResolvedCharacter]:
        """Числа черт всех символов строки либо UnresolvedCharacterError со всеми ненайденными"""
        resolved = [self.resolver.resolve(char) for char in text]
        missing = [item.char for item in resolved if isinstance(item, Unresolved)]
        if missing:
            raise UnresolvedCharacterError(missing)
        return resolved

    def _calculate(self, name: NameInput) -> EngineResult:
        # Разрешаем все символы сразу, чтобы сообщить обо всех ненайденных
        characters = self.resolve_characters(name.surname + name.given_name)

        surname_chars = characters[:len(name.surname)]
        given_chars = characters[len(name.surname):]

        # Составная фамилия: черты всех знаков суммируются
        surname_strokes = sum(item.strokes for item in surname_chars)
        first_strokes = given_chars[0].strokes
        second_strokes = given_chars[1].strokes if len(given_chars) > 1 else None

        grids = calculate_grids(surname_strokes, first_strokes, second_strokes)
        elements = assign_elements(grids)
        sancai = compose_sancai(grids)

        logger.info(
            f"Расчет {name.surname}{name.given_name}: "
            f"天格={grids.heaven} 人格={grids.human} 地格={grids.earth} "
            f"总格={grids.total} 外格={grids.outer} 三才={sancai.combination}"
        )

        return EngineResult(
            success=True,
            surname=name.surname,
            given_name=name.given_name,
            characters=characters,
            grids=grids,
            elements=elements,
            sancai=sancai,
        )
