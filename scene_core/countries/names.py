"""Country name tables (TSV) and feature id normalization."""
import re
from typing import Any, Dict

ID_COLUMN = re.compile(r'^(id|iso_n3)$', re.IGNORECASE)
NAME_COLUMN = re.compile(r'^(name|name_long|name_en|admin|geounit)$', re.IGNORECASE)

UNKNOWN_NAME = 'Unknown'


def normalize_feature_id(raw: Any) -> str:
    """Normalize a feature id for name lookup.

    Numeric ids are zero-padded to three digits (ISO 3166 numeric style),
    so 4, "4" and "004" all become "004". Other ids are returned as text.
    """
    if raw is None:
        return ''
    if isinstance(raw, bool):
        return str(raw)
    if isinstance(raw, int):
        return str(raw).zfill(3)
    text = str(raw).strip()
    if text.isdigit():
        return text.zfill(3)
    return text


def _find_column(header, pattern) -> int:
    for i, col in enumerate(header):
        if pattern.match(col.strip()):
            return i
    return -1


def parse_country_names(tsv_text: str) -> Dict[str, str]:
    """Parse an id -> name table from tab-separated text.

    The first line is the header. The id column is the first one named
    ``id`` or ``iso_n3``; the name column the first of ``name``,
    ``name_long``, ``name_en``, ``admin`` or ``geounit`` (case-insensitive).
    Rows with an empty id or name are skipped.

    Args:
        tsv_text: TSV document

    Returns:
        Dict of normalized id -> name

    Raises:
        ValueError: If the header lacks an id or name column
    """
    lines = tsv_text.strip().splitlines()
    if not lines:
        raise ValueError("Empty country name table")

    header = lines[0].split('\t')
    id_idx = _find_column(header, ID_COLUMN)
    name_idx = _find_column(header, NAME_COLUMN)
    if id_idx < 0 or name_idx < 0:
        raise ValueError(f"Country name table needs id and name columns, got: {header}")

    names = {}
    for line in lines[1:]:
        cols = line.split('\t')
        raw_id = cols[id_idx].strip() if id_idx < len(cols) else ''
        name = cols[name_idx].strip() if name_idx < len(cols) else ''
        if not raw_id or not name:
            continue
        names[normalize_feature_id(raw_id)] = name
    return names


def apply_names(features, names: Dict[str, str]) -> int:
    """Set properties['name'] on each feature from a name table.

    Features whose id is not in the table are named 'Unknown'.

    Returns:
        Number of features that received a real name
    """
    mapped = 0
    for feature in features:
        raw = feature.get('id')
        name = names.get(normalize_feature_id(raw)) or names.get(str(raw))
        props = feature.get('properties') or {}
        props['name'] = name or UNKNOWN_NAME
        feature['properties'] = props
        if name:
            mapped += 1
    return mapped
