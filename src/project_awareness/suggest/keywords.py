"""Project → keyword table.

The table is an ordered list of (project, keywords) pairs. Order matters:
when two projects score the same confidence, the first-declared wins.

An override can live in ``<claude home>/project-keywords.yaml``::

    projects:
      - name: ChittyFinance
        keywords: [finance, invoice, payment]
"""

from __future__ import annotations

from pathlib import Path

import yaml

from project_awareness.paths import keywords_path

KeywordTable = list[tuple[str, list[str]]]

DEFAULT_KEYWORD_TABLE: KeywordTable = [
    ("Arias-v-Bianchi", ["arias", "bianchi", "legal", "court", "evidence", "motion"]),
    ("ChittyOS-Core",   ["chittyos", "mcp", "server", "canon"]),
    ("ChittyFinance",   ["finance", "invoice", "payment", "accounting", "money"]),
    ("ChiCo-Properties", ["property", "rental", "tenant", "lease", "chicago"]),
    ("IT-CAN-BE-LLC",   ["wyoming", "llc", "corporate", "entity"]),
]


def parse_keyword_table(data: object, source: str = "<data>") -> KeywordTable:
    """Validate parsed YAML and convert it to a keyword table.

    Raises:
        ValueError: If the document is not shaped like a keyword table.
    """
    if not isinstance(data, dict):
        raise ValueError(f"{source} is not a YAML mapping")
    entries = data.get("projects") or []
    if not isinstance(entries, list):
        raise ValueError(f"{source}: 'projects' must be a list")

    table: KeywordTable = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get("name"):
            raise ValueError(f"{source}: project entry {i} has no name")
        keywords = entry.get("keywords") or []
        if not isinstance(keywords, list) or not keywords:
            raise ValueError(f"{source}: project '{entry['name']}' has no keywords")
        table.append((str(entry["name"]), [str(k).lower() for k in keywords]))
    return table


def load_keyword_table(
    path: Path | str | None = None,
    home: Path | str | None = None,
) -> KeywordTable:
    """Load the keyword table, falling back to the built-in one.

    Args:
        path: Path to a keyword YAML file. Defaults to the Claude home.
        home: Claude home override used when ``path`` is not given.

    Returns:
        Ordered (project, keywords) pairs.

    Raises:
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the YAML is not a keyword table.
    """
    table_path = Path(path) if path else keywords_path(home)
    if not table_path.is_file():
        return [(name, list(words)) for name, words in DEFAULT_KEYWORD_TABLE]
    with open(table_path) as f:
        data = yaml.safe_load(f)
    return parse_keyword_table(data, str(table_path))
