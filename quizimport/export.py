from __future__ import annotations
import pandas as pd
from io import BytesIO
from typing import Iterable, List
from .synonyms import OPTION_LETTERS
from .types import ParsedQuestion, QuestionType

SHEET_NAME = "Sorular"
COLUMNS = ["Soru", "Tip", *OPTION_LETTERS, "Doğru Cevap", "Puan", "Açıklama"]

# values the importer classifies back to the same type
TYPE_LABELS = {
    QuestionType.MULTIPLE_CHOICE: "Çoktan Seçmeli",
    QuestionType.TRUE_FALSE: "Doğru/Yanlış",
    QuestionType.SHORT_ANSWER: "Kısa Cevap",
}

TEMPLATE_QUESTIONS = [
    ParsedQuestion(
        content="2+2=?",
        type=QuestionType.MULTIPLE_CHOICE,
        options=["3", "4", "5", "6"],
        correct_answer="B",
        points=10,
        explanation="2+2 dört eder.",
    ),
    ParsedQuestion(
        content="Dünya yuvarlaktır.",
        type=QuestionType.TRUE_FALSE,
        options=["Doğru", "Yanlış"],
        correct_answer="Doğru",
        points=5,
    ),
]


def questions_to_frame(questions: Iterable[ParsedQuestion]) -> pd.DataFrame:
    rows: List[dict] = []
    for q in questions:
        row = {c: "" for c in COLUMNS}
        row["Soru"] = q.content
        row["Tip"] = TYPE_LABELS[q.type]
        # true/false options are implied by the type
        if q.type is QuestionType.MULTIPLE_CHOICE:
            for letter, opt in zip(OPTION_LETTERS, q.options):
                row[letter] = opt
        row["Doğru Cevap"] = q.correct_answer
        row["Puan"] = q.points
        row["Açıklama"] = q.explanation or ""
        rows.append(row)
    return pd.DataFrame(rows, columns=COLUMNS)


def export_questions_to_excel_bytes(questions: Iterable[ParsedQuestion]) -> bytes:
    df = questions_to_frame(questions)
    bio = BytesIO()

    with pd.ExcelWriter(bio, engine="xlsxwriter") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)

        wb = writer.book
        ws = writer.sheets[SHEET_NAME]

        fmt_header = wb.add_format({"bold": True, "bg_color": "#F2F2F2", "border": 1, "valign": "vcenter"})

        ws.freeze_panes(1, 0)
        ws.autofilter(0, 0, max(1, len(df)), len(COLUMNS) - 1)
        for col, name in enumerate(COLUMNS):
            ws.write(0, col, name, fmt_header)

        ws.set_column(0, 0, 60)
        ws.set_column(1, 1, 18)
        ws.set_column(2, 6, 20)
        ws.set_column(7, 7, 14)
        ws.set_column(8, 8, 8)
        ws.set_column(9, 9, 40)

    return bio.getvalue()


def build_template_bytes() -> bytes:
    # starter workbook for instructors
    return export_questions_to_excel_bytes(TEMPLATE_QUESTIONS)
