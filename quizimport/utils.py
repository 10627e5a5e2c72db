from __future__ import annotations
import os
import re
import json
import math
import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_DIR = PACKAGE_DIR / "data"

DEFAULT_RULES = {"default_points": 10}

def load_json(path: Path, default: Any):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        return default

def rules_path() -> Path:
    custom = os.environ.get("QUIZIMPORT_RULES")
    if custom:
        return Path(custom)
    return DEFAULT_DATA_DIR / "rules.json"

def load_rules() -> dict:
    loaded = load_json(rules_path(), {})
    rules = dict(DEFAULT_RULES)
    if isinstance(loaded, dict):
        rules.update(loaded)
    return rules

RULES = load_rules()

def default_points() -> int:
    try:
        p = int(RULES.get("default_points", DEFAULT_RULES["default_points"]))
    except (TypeError, ValueError):
        return DEFAULT_RULES["default_points"]
    return p if p > 0 else DEFAULT_RULES["default_points"]

_NBSP_RE = re.compile(r"[\u00A0\u2007\u202F]")  # NBSP variants
_WS_RE = re.compile(r"\s+")


def norm_text(s: Any) -> str:
    """
    Text normalization for header and keyword matching:
    - BOM / non-breaking spaces
    - lower
    - Turkish I variants (İ, I, ı) -> i
    - collapsed whitespace
    """
    if s is None:
        return ""

    s = str(s)
    s = s.replace("\ufeff", "")
    s = _NBSP_RE.sub(" ", s)
    # "İ".lower() would leave a combining dot behind
    s = s.replace("İ", "i").lower().replace("ı", "i")
    s = _WS_RE.sub(" ", s).strip()
    return s

def cell_text(v: Any) -> str:
    # Excel cell -> trimmed text; empty/NaN cells become ""
    if v is None:
        return ""
    if isinstance(v, float):
        if math.isnan(v):
            return ""
        if v.is_integer():
            return str(int(v))
    s = str(v).strip()
    if s.lower() == "nan":
        return ""
    return s

_LEADING_INT_RE = re.compile(r"^\s*([-+]?\d+)")

def parse_points(value: Any, default: Optional[int] = None) -> int:
    # leading integer ("15 pts" -> 15); anything unusable falls back to the default
    fallback = default_points() if default is None else default
    m = _LEADING_INT_RE.match(cell_text(value))
    if not m:
        return fallback
    p = int(m.group(1))
    return p if p > 0 else fallback

def run_guarded(fn: Callable[[], T], label: str, warnings: List[str]) -> Optional[T]:
    """
    Runs one row/block. A failure becomes "<label>: <message>" in `warnings`
    and None is returned so the caller's loop keeps going.
    """
    try:
        return fn()
    except Exception as e:
        msg = str(e) or e.__class__.__name__
        warning = f"{label}: {msg}"
        logger.warning(warning)
        warnings.append(warning)
        return None
