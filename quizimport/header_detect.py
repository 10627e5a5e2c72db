from __future__ import annotations
import logging
from typing import Any, Dict, List
from .synonyms import ColumnRole, role_for_header

logger = logging.getLogger(__name__)

# role -> zero-based column index; absent roles are simply missing
ColumnMapping = Dict[ColumnRole, int]


def detect_column_mapping(headers: List[Any]) -> ColumnMapping:
    """
    Single pass over the header row. Each header cell gets the first role whose
    synonyms it matches; a role already taken by an earlier column is not
    reassigned (the later column is ignored).
    """
    mapping: ColumnMapping = {}
    for idx, header in enumerate(headers):
        role = role_for_header(header)
        if role is None:
            continue
        if role in mapping:
            logger.debug("column %d (%r): role %s already at column %d", idx, header, role.value, mapping[role])
            continue
        mapping[role] = idx

    logger.debug("column mapping: %s", {r.value: i for r, i in mapping.items()})
    return mapping


def describe_mapping(mapping: ColumnMapping, headers: List[Any]) -> Dict[str, str]:
    # role -> original header text, for diagnostics / preview
    out = {}
    for role in ColumnRole:
        idx = mapping.get(role)
        if idx is not None and idx < len(headers):
            out[role.value] = str(headers[idx])
    return out
