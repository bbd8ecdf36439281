"""Проверка ввода до обращения к словарю"""
import logging
import re

from .errors import InvalidInputError
from .models import NameInput

logger = logging.getLogger(__name__)

# Основной блок CJK Unified Ideographs, как в форме расчета на сайте
CHINESE_PATTERN = re.compile(r'[一-龥]+')

MAX_GIVEN_NAME_LENGTH = 2


def _check_field(field: str, value: str) -> None:
    if not value:
        raise InvalidInputError(field, InvalidInputError.EMPTY)
    if not CHINESE_PATTERN.fullmatch(value):
        raise InvalidInputError(field, InvalidInputError.NON_CHINESE)


def validate_name(surname: str, given_name: str) -> NameInput:
    """Проверяет фамилию и имя, возвращает их без изменений"""
    try:
        _check_field('surname', surname)
        _check_field('given_name', given_name)
        if len(given_name) > MAX_GIVEN_NAME_LENGTH:
            raise InvalidInputError('given_name', InvalidInputError.TOO_LONG)
    except InvalidInputError as e:
        logger.info(f"Некорректный ввод: поле {e.field}, причина {e.reason}")
        raise
    return NameInput(surname=surname, given_name=given_name)
