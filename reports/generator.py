"""Генератор текстовых отчетов по расчету трех талантов и пяти решеток"""
import logging
from typing import Optional

from sancai_calculator.models import EngineResult, SancaiTriple

logger = logging.getLogger(__name__)

SEPARATOR = "━" * 40

GRID_LABELS = [
    ('heaven', '天格'),
    ('human', '人格'),
    ('earth', '地格'),
    ('total', '总格'),
    ('outer', '外格'),
]

SOURCE_LABELS = {
    'kangxi': '康熙',
    'traditional': '繁体',
    'simplified': '简体',
}


class ReportGenerator:
    """Генератор текстовых отчетов"""

    def __init__(self, reference_list_url: Optional[str] = None):
        """
        Инициализация генератора отчетов

        Args:
            reference_list_url: Ссылка на справочник иероглифов для отчета об ошибке
        """
        self.reference_list_url = reference_list_url

    def generate_text_report(self, result: EngineResult) -> str:
        """Генерирует текстовый отчет"""
        if not result.success:
            return self._generate_failure_report(result)

        report = f"""
╔════════════════════════════════════════╗
║     三才五格 计算结果                   ║
╚════════════════════════════════════════╝

👤 姓名: {result.surname}{result.given_name}

{SEPARATOR}

✍️ 康熙笔画:

{self._format_characters(result)}

{SEPARATOR}

🔢 五格:

{self._format_grids(result)}

{SEPARATOR}

🌏 三才: {self._format_sancai(result.sancai)}
"""
        report += f"\n{SEPARATOR}\n"
        report += "✨ 报告自动生成\n"
        return report

    def _generate_failure_report(self, result: EngineResult) -> str:
        error = result.error
        report = f"⚠️ {error.message}\n"
        if error.invalid_characters and self.reference_list_url:
            report += f"\n查询通用规范汉字表: {self.reference_list_url}\n"
        return report

    def _format_characters(self, result: EngineResult) -> str:
        return "\n".join(
            f"• {item.char}: {item.strokes} 画 ({SOURCE_LABELS.get(item.source, item.source)})"
            for item in result.characters
        )

    def _format_grids(self, result: EngineResult) -> str:
        lines = []
        for key, label in GRID_LABELS:
            value = getattr(result.grids, key)
            element = getattr(result.elements, key)
            lines.append(f"• {label}: {value} ({element.chinese})")
        return "\n".join(lines)

    def _format_sancai(self, sancai: SancaiTriple) -> str:
        return f"{sancai.combination} (天 {sancai.heaven.chinese} · 人 {sancai.human.chinese} · 地 {sancai.earth.chinese})"
