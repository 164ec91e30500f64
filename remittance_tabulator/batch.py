"""Best-effort conversion of several named documents into one table."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from .errors import ConversionError, ParseError, TabulatorError
from .export import check_rows
from .extraction import extract
from .flattening import Row
from .io_utils import display_name, parse_json_text, read_json_content, source_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedDocument:
    name: str
    data: Any


@dataclass(frozen=True)
class ItemError:
    name: str
    message: str

    @classmethod
    def from_exception(cls, exc: TabulatorError) -> 'ItemError':
        return cls(exc.source, exc.message)

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"


@dataclass
class BatchResult:
    columns: List[str] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)
    errors: List[ItemError] = field(default_factory=list)
    documents: List[str] = field(default_factory=list)


def derive_columns(rows: Sequence[Mapping[str, Any]]) -> List[str]:
    """Column names are the keys of the first row."""
    if not rows:
        return []
    return list(rows[0].keys())


def load_sources(files: Optional[Iterable[Any]]) -> Tuple[List[NamedDocument], List[ItemError]]:
    """Parse each uploaded file; one bad file does not stop the others."""
    documents: List[NamedDocument] = []
    errors: List[ItemError] = []
    for file_obj in files or []:
        try:
            data = read_json_content(file_obj)
        except ParseError as exc:
            logger.warning("Skipping %s: %s", exc.source, exc.message)
            errors.append(ItemError.from_exception(exc))
            continue
        documents.append(NamedDocument(display_name(source_name(file_obj)), data))
    logger.info("Loaded %d of %d file(s)", len(documents), len(documents) + len(errors))
    return documents, errors


def parse_pasted(text: Optional[str], existing_count: int = 0) -> Optional[NamedDocument]:
    """Parse pasted JSON; blank input gives None, bad JSON raises ParseError."""
    if text is None or not text.strip():
        return None
    name = f"manual_input_{existing_count + 1}"
    return NamedDocument(name, parse_json_text(text, name))


def convert_document(document: NamedDocument) -> List[Row]:
    """Rows for one document, checked against what the spreadsheet sink accepts."""
    try:
        rows = extract(document.data)
        check_rows(rows)
        return rows
    except Exception as exc:
        raise ConversionError(document.name, f"Error converting document: {exc}") from exc


def convert_batch(documents: Iterable[NamedDocument]) -> BatchResult:
    """Extract every document in input order and concatenate the rows."""
    result = BatchResult()
    for document in documents:
        try:
            rows = convert_document(document)
        except ConversionError as exc:
            logger.error("Conversion failed for %s: %s", exc.source, exc.message)
            result.errors.append(ItemError.from_exception(exc))
            continue
        result.rows.extend(rows)
        result.documents.append(document.name)
    result.columns = derive_columns(result.rows)
    logger.info("Converted %d document(s) into %d row(s)", len(result.documents), len(result.rows))
    return result
