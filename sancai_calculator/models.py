"""Модели данных для трех талантов и пяти решеток"""
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Element(str, Enum):
    """Пять элементов (у-син)"""
    WOOD = 'wood'
    FIRE = 'fire'
    EARTH = 'earth'
    METAL = 'metal'
    WATER = 'water'

    @property
    def chinese(self) -> str:
        return ELEMENT_LABELS[self]


ELEMENT_LABELS = {
    Element.WOOD: '木',
    Element.FIRE: '火',
    Element.EARTH: '土',
    Element.METAL: '金',
    Element.WATER: '水',
}


class StrokeCounts(BaseModel):
    """Число черт символа по трем источникам"""
    model_config = ConfigDict(frozen=True, extra='ignore')

    kangxi: Optional[int] = None
    traditional: Optional[int] = None
    simplified: Optional[int] = None


class CharacterRecord(BaseModel):
    """Запись справочного словаря"""
    model_config = ConfigDict(frozen=True, extra='ignore')

    char: str
    strokes: StrokeCounts = StrokeCounts()


class NameInput(BaseModel):
    """Входные данные: фамилия и имя"""
    model_config = ConfigDict(frozen=True)

    surname: str
    given_name: str


class ResolvedCharacter(BaseModel):
    """Символ с найденным числом черт"""
    model_config = ConfigDict(frozen=True)

    char: str
    strokes: int
    source: str  # 'kangxi', 'traditional' или 'simplified'


class Unresolved(BaseModel):
    """Символ без пригодного числа черт"""
    model_config = ConfigDict(frozen=True)

    char: str


class GridSet(BaseModel):
    """Пять решеток"""
    model_config = ConfigDict(frozen=True)

    heaven: int = Field(..., ge=0, description='天格')
    human: int = Field(..., ge=0, description='人格')
    earth: int = Field(..., ge=0, description='地格')
    total: int = Field(..., ge=0, description='总格')
    outer: int = Field(..., ge=0, description='外格')


class ElementAssignment(BaseModel):
    """Элемент для каждой из пяти решеток"""
    model_config = ConfigDict(frozen=True)

    heaven: Element
    human: Element
    earth: Element
    total: Element
    outer: Element


class SancaiTriple(BaseModel):
    """Три таланта: небо, человек, земля (порядок значим)"""
    model_config = ConfigDict(frozen=True)

    heaven: Element
    human: Element
    earth: Element

    @property
    def combination(self) -> str:
        """Китайская запись, например 土土火"""
        return ''.join(element.chinese for element in self.as_tuple())

    def as_tuple(self) -> Tuple[Element, Element, Element]:
        return (self.heaven, self.human, self.earth)


class ErrorKind(str, Enum):
    INVALID_INPUT = 'invalid_input'
    UNRESOLVED_CHARACTER = 'unresolved_character'


class EngineError(BaseModel):
    """Описание неудачного расчета"""
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    field: Optional[str] = None
    reason: Optional[str] = None
    invalid_characters: List[str] = []


class EngineResult(BaseModel):
    """Результат расчета: либо решетки и элементы, либо ошибка"""
    model_config = ConfigDict(frozen=True)

    success: bool
    surname: str
    given_name: str

    # Успех
    characters: List[ResolvedCharacter] = []
    grids: Optional[GridSet] = None
    elements: Optional[ElementAssignment] = None
    sancai: Optional[SancaiTriple] = None

    # Неудача
    error: Optional[EngineError] = None
