"""
This package contains:
- loading spreadsheet / Word question files from raw bytes
- column role detection over the spreadsheet header (Turkish and English)
- question block segmentation for free-text documents
- conversion of parsed questions into exam API requests
- exporting questions back to a spreadsheet template
"""
from .types import QuestionType, ParsedQuestion, ImportResult, CreateQuestionRequest, FatalImportError
from .synonyms import ColumnRole
from .header_detect import detect_column_mapping
from .tabular import parse_tabular
from .document import parse_document
from .dispatch import parse_question_file
from .normalize import to_create_requests
from .export import export_questions_to_excel_bytes, build_template_bytes

__all__ = [
    "QuestionType",
    "ParsedQuestion",
    "ImportResult",
    "CreateQuestionRequest",
    "FatalImportError",
    "ColumnRole",
    "detect_column_mapping",
    "parse_tabular",
    "parse_document",
    "parse_question_file",
    "to_create_requests",
    "export_questions_to_excel_bytes",
    "build_template_bytes",
]
