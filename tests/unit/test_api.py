"""Tests for the composable API functions in switchtac.api."""

import pytest

from switchtac import (
    DEFAULT,
    CaseEntry,
    TranslationConfig,
    TranslationResult,
    dump_code,
    quad_stats,
    translate_document,
    translate_switch_case,
)
from switchtac.document import parse_document
from switchtac.ir import Quad

CASES = [(1, ["x = 1"]), (2, ["x = 2"]), (DEFAULT, ["x = 0"])]


class TestTranslateSwitchCase:
    def test_returns_translation_result(self):
        result = translate_switch_case("day", CASES)
        assert isinstance(result, TranslationResult)
        assert all(isinstance(quad, Quad) for quad in result.quads)
        assert [str(quad) for quad in result.quads] == result.code

    def test_accepts_case_entries(self):
        entries = [CaseEntry(value=v, statements=tuple(s)) for v, s in CASES]
        assert translate_switch_case("day", entries).code == translate_switch_case("day", CASES).code

    def test_accepts_generator_of_cases(self):
        result = translate_switch_case("day", (case for case in CASES))
        assert len(result.code) == 11

    @pytest.mark.parametrize("expression", ["", "   "])
    def test_empty_expression_is_rejected(self, expression):
        with pytest.raises(ValueError):
            translate_switch_case(expression, CASES)

    def test_expression_is_not_validated_as_identifier(self):
        result = translate_switch_case("a[i] + 1", [(1, [])])
        assert "2: if a[i] + 1 == 1 goto 1" in result.code

    def test_group_parentheses_config(self):
        config = TranslationConfig(group_parentheses=True)
        result = translate_switch_case("s", [(1, ["a = (b + c) * d"])], config)
        assert result.code[1:4] == ["1: t0 = b + c", "2: t1 = t0 * d", "3: a = t1"]


class TestDumpCode:
    def test_one_line_per_quad(self):
        text = dump_code("day", CASES)
        assert text.splitlines()[0] == "0: goto 7"
        assert len(text.splitlines()) == 11


class TestQuadStats:
    def test_counts_opcodes(self):
        assert quad_stats("day", CASES) == {"GOTO": 5, "COPY": 3, "IF_GOTO": 2, "MARKER": 1}


class TestTranslateDocument:
    def test_translates_parsed_document(self):
        document = parse_document(
            '{"expression": "day", "cases": ['
            '{"value": 1, "statements": ["x = 1"]},'
            '{"value": 2, "statements": ["x = 2"]},'
            '{"default": true, "statements": ["x = 0"]}]}'
        )
        assert translate_document(document).code == translate_switch_case("day", CASES).code


class TestReport:
    def test_report_lists_code(self):
        report = translate_switch_case("day", CASES).report()
        assert "0: goto 7" in report
        assert "(11 quads, 0 temporaries)" in report
        assert "Trace" not in report

    def test_report_with_logs(self):
        report = translate_switch_case("day", CASES).report(include_logs=True)
        assert "Switch expression: day" in report

    def test_report_counts_temporaries(self):
        report = translate_switch_case("op", [(1, ["r = a + b * c"])]).report()
        assert "(7 quads, 2 temporaries)" in report
