"""Справочный словарь черт и его однократная загрузка"""
import asyncio
import json
import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import aiofiles
import aiohttp
from pydantic import ValidationError

from .errors import DictionaryUnavailableError
from .models import CharacterRecord
from .validator import CHINESE_PATTERN

logger = logging.getLogger(__name__)


class CharacterDictionary:
    """Неизменяемый словарь: символ -> запись с числами черт"""

    def __init__(self, records: Mapping[str, CharacterRecord]):
        self._records = MappingProxyType(dict(records))

    @classmethod
    def from_payload(cls, payload: Any, source: str = '<memory>') -> 'CharacterDictionary':
        """
        Строит словарь из разобранного JSON

        Принимает как голый словарь символов, так и формат базы
        с обёрткой {"meta": ..., "statistics": ..., "data": {...}}.
        Ключи, не являющиеся одним китайским иероглифом, считаются
        метаданными и пропускаются.
        """
        if not isinstance(payload, dict):
            raise DictionaryUnavailableError(source, "ожидался JSON-объект")

        entries = payload.get('data') if isinstance(payload.get('data'), dict) else payload

        records: Dict[str, CharacterRecord] = {}
        skipped = 0
        for key, value in entries.items():
            if len(key) != 1 or not CHINESE_PATTERN.fullmatch(key):
                skipped += 1
                continue
            try:
                records[key] = CharacterRecord.model_validate(value)
            except ValidationError as e:
                logger.error(f"Некорректная запись словаря для '{key}': {e}")
                raise DictionaryUnavailableError(source, f"некорректная запись '{key}'") from e

        if skipped:
            logger.debug(f"Пропущено служебных ключей: {skipped}")
        return cls(records)

    @classmethod
    def from_json(cls, text: str, source: str = '<memory>') -> 'CharacterDictionary':
        try:
            payload = json.loads(text)
        except ValueError as e:
            raise DictionaryUnavailableError(source, f"некорректный JSON: {e}") from e
        return cls.from_payload(payload, source)

    def lookup(self, char: str) -> Optional[CharacterRecord]:
        """Запись символа или None, если символа нет"""
        return self._records.get(char)

    def __contains__(self, char: object) -> bool:
        return char in self._records

    def __len__(self) -> int:
        return len(self._records)


class DictionaryLoader:
    """
    Однократная асинхронная загрузка словаря

    Все вызовы load(), пришедшие до окончания загрузки, ждут одну и ту же
    задачу. После неудачи каждый вызов получает DictionaryUnavailableError,
    пока не вызван reset().
    """

    def __init__(self, source: str, timeout: float = 30):
        self.source = source
        self.timeout = timeout
        self._dictionary: Optional[CharacterDictionary] = None
        self._error: Optional[DictionaryUnavailableError] = None
        self._task: Optional[asyncio.Future] = None

    @property
    def loaded(self) -> bool:
        return self._dictionary is not None

    @property
    def failed(self) -> bool:
        return self._error is not None

    async def load(self, timeout: Optional[float] = None) -> CharacterDictionary:
        """Возвращает словарь, при необходимости загружая его"""
        if self._dictionary is not None:
            return self._dictionary
        if self._error is not None:
            raise self._error

        # Отмененную загрузку начинаем заново
        if self._task is not None and self._task.cancelled():
            logger.warning(f"Загрузка словаря {self.source} была отменена, повторяем")
            self._task = None

        if self._task is None:
            self._task = asyncio.ensure_future(self._load())
            self._task.add_done_callback(self._retrieve_result)
        task = self._task

        # shield: таймаут или отмена одного вызывающего не отменяют общую загрузку
        waiter = asyncio.shield(task)
        try:
            if timeout is None:
                return await waiter
            return await asyncio.wait_for(waiter, timeout)
        except asyncio.TimeoutError:
            raise DictionaryUnavailableError(
                self.source, f"превышено время ожидания {timeout} с"
            ) from None
        except asyncio.CancelledError:
            if task.cancelled():
                raise DictionaryUnavailableError(self.source, "загрузка отменена") from None
            raise

    @staticmethod
    def _retrieve_result(task: asyncio.Future) -> None:
        # Ошибка забирается здесь, даже если все ожидающие ушли по таймауту
        if not task.cancelled():
            task.exception()

    def get(self) -> CharacterDictionary:
        """Уже загруженный словарь без ожидания"""
        if self._error is not None:
            raise self._error
        if self._dictionary is None:
            raise DictionaryUnavailableError(self.source, "словарь еще загружается")
        return self._dictionary

    def lookup(self, char: str) -> Optional[CharacterRecord]:
        return self.get().lookup(char)

    def reset(self) -> None:
        """Сбрасывает неудачную загрузку, чтобы можно было повторить"""
        if self._task is not None and not self._task.done():
            return
        self._task = None
        self._error = None

    async def _load(self) -> CharacterDictionary:
        logger.info(f"Загрузка словаря черт из {self.source}")
        try:
            text = await asyncio.wait_for(self._fetch(), self.timeout)
            dictionary = CharacterDictionary.from_json(text, self.source)
        except DictionaryUnavailableError as e:
            logger.error(f"Ошибка загрузки словаря: {e}")
            self._error = e
            raise
        except (aiohttp.ClientError, OSError, UnicodeDecodeError, asyncio.TimeoutError) as e:
            logger.error(f"Ошибка загрузки словаря {self.source}: {e!r}")
            self._error = DictionaryUnavailableError(self.source, str(e) or type(e).__name__)
            raise self._error from e

        self._dictionary = dictionary
        logger.info(f"Словарь загружен: {len(dictionary)} символов")
        return dictionary

    async def _fetch(self) -> str:
        """Читает ресурс по URL или с диска"""
        if self.source.startswith(('http://', 'https://')):
            async with aiohttp.ClientSession() as session:
                async with session.get(self.source) as response:
                    if response.status != 200:
                        raise DictionaryUnavailableError(self.source, f"HTTP {response.status}")
                    return await response.text(encoding='utf-8')

        async with aiofiles.open(self.source, mode='r', encoding='utf-8') as f:
            return await f.read()
