"""Тесты текстовых отчетов"""
from reports import ReportGenerator
from sancai_calculator import SancaiCalculator


class TestReportGenerator:

    def test_success_report(self, dictionary):
        result = SancaiCalculator(dictionary).calculate("王", "浩然")
        report = ReportGenerator().generate_text_report(result)

        assert "王浩然" in report
        assert "浩: 11 画 (康熙)" in report
        assert "外格: 13 (火)" in report
        assert "土土火" in report

    def test_failure_report_lists_characters(self, dictionary):
        result = SancaiCalculator(dictionary).calculate("王", "丁鑫")
        report = ReportGenerator(reference_list_url="/standard-characters").generate_text_report(result)

        assert "丁、鑫" in report
        assert "/standard-characters" in report

    def test_invalid_input_report_has_no_reference_link(self, dictionary):
        result = SancaiCalculator(dictionary).calculate("", "浩")
        report = ReportGenerator(reference_list_url="/standard-characters").generate_text_report(result)

        assert "请输入姓氏" in report
        assert "/standard-characters" not in report
