import json
import logging
import os
from typing import Any, Dict, List

from errors import OutputWriteError
from key_path import build_tree
from translations import Translation


def locale_file_path(output_dir: str, locale: str) -> str:
    return os.path.join(output_dir, f'{locale}.json')


def flat_document(translations: List[Translation]) -> Dict[str, str]:
    """Map each raw dotted key to its value, in first-occurrence order."""
    doc: Dict[str, str] = {}
    for t in translations:
        if t.key in doc:
            logging.warning('Duplicate key %s, keeping the later value', t.key)
        doc[t.key] = t.value
    return doc


def _dumps(doc: Dict[str, Any]) -> str:
    return json.dumps(doc, ensure_ascii=False, indent=2)


def _write_text(path: str, text: str) -> None:
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
            f.write('\n')
    except OSError as e:
        raise OutputWriteError(f"can't write locale file {path}: {e}") from e


def write_locale_file_flat(output_dir: str, locale: str, translations: List[Translation]) -> str:
    """Write a single-level JSON object keyed by the literal dotted keys."""
    path = locale_file_path(output_dir, locale)
    doc = flat_document(translations)
    # braces stay on their own lines when there are no keys
    _write_text(path, _dumps(doc) if doc else '{\n}')
    return path


def write_locale_file_tree(output_dir: str, locale: str, translations: List[Translation]) -> str:
    """Write a nested JSON object, one level per dot-separated key segment."""
    path = locale_file_path(output_dir, locale)
    _write_text(path, _dumps(build_tree(translations)))
    return path


def write_locale_file(output_dir: str, locale: str, translations: List[Translation], is_flat: bool = False) -> str:
    """Write '<output_dir>/<locale>.json' in the selected format and return its path."""
    if is_flat:
        return write_locale_file_flat(output_dir, locale, translations)
    return write_locale_file_tree(output_dir, locale, translations)
