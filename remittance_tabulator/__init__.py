"""Core logic for the Remittance Tabulator.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse JSON sources into named documents
- extract one row per claim activity from remittance documents
- flatten anything else into single-level records
- export the combined rows to xlsx/csv/json
"""
from .batch import convert_batch
from .extraction import extract
from .flattening import flatten

__all__ = ['convert_batch', 'extract', 'flatten']
