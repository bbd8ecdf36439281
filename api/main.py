"""FastAPI приложение"""
import logging

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict

from config import settings
from reports import ReportGenerator
from sancai_calculator import (
    DictionaryLoader, DictionaryUnavailableError, EngineResult, SancaiCalculator, Unresolved
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="三才五格 API",
    description="API для расчета трех талантов и пяти решеток китайского имени",
    version="1.0.0"
)

# Инициализация
loader = DictionaryLoader(settings.dictionary_source, timeout=settings.dictionary_timeout)
report_generator = ReportGenerator(reference_list_url=settings.reference_list_url)


# Загрузка словаря при старте; запросы, пришедшие раньше, ждут ту же загрузку
@app.on_event("startup")
async def startup_event():
    try:
        await loader.load()
    except DictionaryUnavailableError as e:
        logger.error(f"Словарь не загружен при старте: {e}")


# Модели запросов
class SancaiRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    surname: str
    given_name: str


def get_loader() -> DictionaryLoader:
    return loader


async def get_calculator(dictionary_loader: DictionaryLoader = Depends(get_loader)) -> SancaiCalculator:
    """Калькулятор поверх загруженного словаря; неудачная загрузка повторяется"""
    if dictionary_loader.failed:
        logger.info("Повторная попытка загрузки словаря")
        dictionary_loader.reset()
    try:
        dictionary = await dictionary_loader.load(timeout=settings.dictionary_timeout)
    except DictionaryUnavailableError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return SancaiCalculator(dictionary)


def _raise_for_failure(result: EngineResult) -> None:
    if result.success:
        return
    detail = {
        "success": False,
        "error": result.error.model_dump(mode="json"),
    }
    if result.error.invalid_characters:
        detail["reference_list_url"] = settings.reference_list_url
    raise HTTPException(status_code=422, detail=detail)


# API endpoints
@app.get("/")
async def root():
    """Корневой endpoint"""
    return {
        "message": "三才五格 API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.post("/api/sancai")
async def calculate_sancai(request: SancaiRequest, calculator: SancaiCalculator = Depends(get_calculator)):
    """Расчет пяти решеток и трех талантов"""
    result = calculator.calculate(request.surname, request.given_name)
    _raise_for_failure(result)

    return {
        "success": True,
        "data": result.model_dump(mode="json")
    }


@app.post("/api/sancai/report")
async def calculate_sancai_report(request: SancaiRequest, calculator: SancaiCalculator = Depends(get_calculator)):
    """Расчет с текстовым отчетом"""
    result = calculator.calculate(request.surname, request.given_name)
    _raise_for_failure(result)

    return {
        "success": True,
        "report": report_generator.generate_text_report(result),
        "data": result.model_dump(mode="json")
    }


@app.get("/api/characters/{char}")
async def get_character(char: str, calculator: SancaiCalculator = Depends(get_calculator)):
    """Запись словаря и выбранное число черт для одного символа"""
    if len(char) != 1:
        raise HTTPException(status_code=400, detail="Ожидается один символ")

    resolved = calculator.resolver.resolve(char)
    if isinstance(resolved, Unresolved):
        raise HTTPException(status_code=404, detail="Character not found")

    record = calculator.dictionary.lookup(char)
    return {
        "success": True,
        "data": {
            "char": char,
            "strokes": record.strokes.model_dump(),
            "resolved_strokes": resolved.strokes,
            "source": resolved.source
        }
    }


@app.get("/api/dictionary/status")
async def dictionary_status(dictionary_loader: DictionaryLoader = Depends(get_loader)):
    """Состояние словаря черт"""
    return {
        "source": dictionary_loader.source,
        "loaded": dictionary_loader.loaded,
        "failed": dictionary_loader.failed,
        "characters": len(dictionary_loader.get()) if dictionary_loader.loaded else 0
    }


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=logging.DEBUG if settings.debug else logging.INFO
    )
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
