from __future__ import annotations
import logging
from io import BytesIO
from typing import Any, List, Optional
import pandas as pd
from openpyxl import load_workbook
from .utils import cell_text

logger = logging.getLogger(__name__)

ORIGIN_COL = "_origin_row"
# =========================

# Excel: sheet as a matrix of raw cell values
# =========================
def _sheet_to_matrix(wb_bytes: bytes, sheet_name: str) -> List[List[Any]]:
    wb = load_workbook(BytesIO(wb_bytes), read_only=True, data_only=True)
    try:
        ws = wb[sheet_name]
        rows = [list(r) for r in ws.iter_rows(values_only=True)]
    finally:
        wb.close()

    # read-only sheets may yield ragged rows; pad to the widest one
    width = max((len(r) for r in rows), default=0)
    for r in rows:
        if len(r) < width:
            r.extend([None] * (width - len(r)))
    return rows


def _first_used_row(df: pd.DataFrame) -> int:
    for i, row in enumerate(df.itertuples(index=False)):
        if any(cell_text(v) for v in row):
            return i
    return len(df)
# =========================

# Main: bytes -> first sheet
# =========================
def sheet_names(data: bytes) -> List[str]:
    with pd.ExcelFile(BytesIO(data)) as xls:
        return list(xls.sheet_names)


def load_first_sheet(data: bytes) -> Optional[pd.DataFrame]:
    """
    Returns the first sheet as a header-less DataFrame:
      - leading empty rows are dropped; the first row left is the header
      - column 0 is "_origin_row" (real spreadsheet row number, 1-based)
      - the remaining columns are raw cell values, in sheet order
    None when the workbook has no sheets. Decoding errors propagate.
    """
    names = sheet_names(data)
    if not names:
        return None
    sheet = names[0]

    try:
        df_raw = pd.DataFrame(_sheet_to_matrix(data, sheet))
    except Exception as e:
        # legacy .xls and anything openpyxl rejects
        logger.debug("openpyxl could not read sheet %r (%s), falling back to pandas", sheet, e)
        df_raw = pd.read_excel(BytesIO(data), sheet_name=sheet, header=None)

    df_raw.columns = range(df_raw.shape[1])

    # the used range may start below row 1; the header is the first non-empty row
    first = _first_used_row(df_raw)
    df_raw = df_raw.iloc[first:].reset_index(drop=True)
    df_raw.insert(0, ORIGIN_COL, range(first + 1, first + 1 + len(df_raw)))
    return df_raw
