from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

import gradio as gr

from .batch import BatchResult, ItemError, NamedDocument, convert_batch, load_sources, parse_pasted
from .config import get_settings
from .errors import ParseError, TabulatorError
from .export import export_rows, preview, to_frame

logger = logging.getLogger(__name__)


def format_errors(errors: Sequence[Any]) -> str:
    return "\n".join(str(e) for e in errors)


def file_list_update(documents: Sequence[NamedDocument]):
    choices = [(f"{idx + 1}. {doc.name}", str(idx)) for idx, doc in enumerate(documents)]
    return gr.update(choices=choices, value=None, interactive=bool(choices))


def loaded_files_text(documents: Sequence[NamedDocument]) -> str:
    if not documents:
        return ""
    names = "\n".join(f"- {doc.name}" for doc in documents)
    return f"Loaded Files ({len(documents)})\n{names}"


def build_preview(documents: Sequence[NamedDocument]):
    """Convert the loaded documents and return (preview frame, caption, result)."""
    result = convert_batch(documents)
    if not result.rows:
        return None, "", result
    shown, caption = preview(result.rows, get_settings().PREVIEW_LIMIT)
    return to_frame(result.columns, shown), caption, result


def refresh_outputs(documents: List[NamedDocument], status: str, errors: Sequence[ItemError]):
    frame, caption, result = build_preview(documents)
    all_errors = list(errors) + list(result.errors)
    return (
        documents,
        file_list_update(documents),
        loaded_files_text(documents),
        status,
        format_errors(all_errors),
        frame,
        caption,
    )


def handle_file_upload(files, documents: Optional[List[NamedDocument]]):
    documents = list(documents or [])
    files = files or []
    if not isinstance(files, (list, tuple)):
        files = [files]

    loaded, errors = load_sources(files)
    documents.extend(loaded)
    status = f"{len(loaded)} file(s) loaded successfully" if loaded else ""
    return refresh_outputs(documents, status, errors)


def handle_paste(text: Optional[str], documents: Optional[List[NamedDocument]]):
    documents = list(documents or [])
    try:
        pasted = parse_pasted(text, len(documents))
    except ParseError as exc:
        return refresh_outputs(documents, "", [ItemError.from_exception(exc)])

    if pasted is None:
        return refresh_outputs(documents, "", [])
    documents.append(pasted)
    return refresh_outputs(documents, "JSON parsed successfully", [])


def handle_remove(selected: Optional[str], documents: Optional[List[NamedDocument]]):
    documents = list(documents or [])
    try:
        idx = int(selected)
    except (TypeError, ValueError):
        return refresh_outputs(documents, "Select a file to remove.", [])
    if not 0 <= idx < len(documents):
        return refresh_outputs(documents, "Select a file to remove.", [])

    removed = documents.pop(idx)
    logger.info("Removed %s", removed.name)
    return refresh_outputs(documents, f"Removed {removed.name}", [])


def handle_reset():
    return [], file_list_update([]), "", "", "", None, "", "", None


def export_data_handler(documents: Optional[List[NamedDocument]], output_format: str, file_name: Optional[str]):
    if not documents:
        return None, "No data to convert", ""

    result: BatchResult = convert_batch(documents)
    try:
        path = export_rows(result.columns, result.rows, output_format, file_name)
    except (TabulatorError, ValueError) as exc:
        logger.error("Export failed: %s", exc)
        return None, "", f"{exc}\n{format_errors(result.errors)}".strip()

    status = f"Combined data from {len(result.documents)} file(s) exported successfully"
    return path, status, format_errors(result.errors)
