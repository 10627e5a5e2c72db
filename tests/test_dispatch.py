"""Tests for format dispatch by file extension."""

import pytest

import quizimport.dispatch as dispatch
from quizimport.dispatch import parse_question_file
from quizimport.types import ImportResult


class TestParseQuestionFile:
    """Tests for parse_question_file()."""

    @pytest.mark.parametrize("filename", ["sorular.xlsx", "SORULAR.XLSX", "old.xls", "Old.Xls"])
    def test_parse_question_file_when_spreadsheet_extension_then_tabular_parser(self, filename, monkeypatch):
        calls = []
        monkeypatch.setitem(dispatch.PARSERS, ".xlsx", lambda data: calls.append(("tab", data)) or ImportResult(True))
        monkeypatch.setitem(dispatch.PARSERS, ".xls", lambda data: calls.append(("tab", data)) or ImportResult(True))

        parse_question_file(b"raw", filename)

        assert calls == [("tab", b"raw")]

    @pytest.mark.parametrize("filename", ["exam.docx", "EXAM.DOCX"])
    def test_parse_question_file_when_docx_extension_then_document_parser(self, filename, monkeypatch):
        calls = []
        monkeypatch.setitem(dispatch.PARSERS, ".docx", lambda data: calls.append(("doc", data)) or ImportResult(True))

        parse_question_file(b"raw", filename)

        assert calls == [("doc", b"raw")]

    @pytest.mark.parametrize("filename", ["notes.pdf", "exam.doc", "sheet.csv", "noext", ""])
    def test_parse_question_file_when_unsupported_then_rejected(self, filename):
        result = parse_question_file(b"anything", filename)

        assert result.success is False
        assert result.questions == []
        assert result.warnings == []
        assert result.errors == [f"Unsupported file format: {filename}. Supported: .xlsx, .xls, .docx"]

    def test_parse_question_file_when_spreadsheet_then_questions_parsed(self, xlsx_factory, turkish_header):
        data = xlsx_factory([turkish_header, ["2+2=?", "Çoktan Seçmeli", "3", "4", "5", "6", "B", "10"]])

        result = parse_question_file(data, "Sınav.xlsx")

        assert result.success is True
        assert result.questions[0].options == ["3", "4", "5", "6"]

    @pytest.mark.parametrize("filename", ["a.xlsx", "a.docx"])
    def test_parse_question_file_when_empty_buffer_then_one_fatal_error(self, filename):
        result = parse_question_file(b"", filename)

        assert result.success is False
        assert result.questions == []
        assert len(result.errors) == 1
