"""Модуль расчета трех талантов и пяти решеток (三才五格)"""
from .calculator import SancaiCalculator, calculate_grids
from .dictionary import CharacterDictionary, DictionaryLoader
from .elements import assign_elements, compose_sancai, element_of
from .errors import (
    DictionaryUnavailableError, InvalidInputError, SancaiError, UnresolvedCharacterError
)
from .models import (
    CharacterRecord, Element, ElementAssignment, EngineError, EngineResult, ErrorKind,
    GridSet, NameInput, ResolvedCharacter, SancaiTriple, StrokeCounts, Unresolved
)
from .resolver import StrokeResolver
from .validator import validate_name

__all__ = [
    'SancaiCalculator', 'calculate_grids',
    'CharacterDictionary', 'DictionaryLoader',
    'assign_elements', 'compose_sancai', 'element_of',
    'DictionaryUnavailableError', 'InvalidInputError', 'SancaiError', 'UnresolvedCharacterError',
    'CharacterRecord', 'Element', 'ElementAssignment', 'EngineError', 'EngineResult', 'ErrorKind',
    'GridSet', 'NameInput', 'ResolvedCharacter', 'SancaiTriple', 'StrokeCounts', 'Unresolved',
    'StrokeResolver', 'validate_name',
]
