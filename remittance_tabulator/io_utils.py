from __future__ import annotations

import json
import os
from typing import Any

from .errors import ParseError


def source_name(file_obj) -> str:
    """Path or file name of an upload, as shown to the user."""
    name = getattr(file_obj, 'name', file_obj)
    return os.path.basename(str(name))


def display_name(file_name: str) -> str:
    base = os.path.basename(file_name)
    return base[:-len('.json')] if base.lower().endswith('.json') else base


def parse_json_text(content, source: str) -> Any:
    if isinstance(content, bytes):
        try:
            content = content.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise ParseError(source, f"Invalid JSON format: {exc}") from exc
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ParseError(source, f"Invalid JSON format: {exc}") from exc


def read_json_content(file_obj) -> Any:
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    name = source_name(file_obj)
    if not name.lower().endswith('.json'):
        raise ParseError(name, "Not a valid JSON file")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        return parse_json_text(file_obj.read(), name)

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    try:
        with open(path, 'rb') as f:
            content = f.read()
    except OSError as exc:
        raise ParseError(name, "Error reading file") from exc
    return parse_json_text(content, name)
