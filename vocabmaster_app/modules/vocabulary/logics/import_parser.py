"""
Pure parsing for bulk vocabulary import.
No Database access, no Models, no Flask.

Row-level problems are collected into ``ParseResult.errors`` and the valid
rows are still returned. Only a structural failure (unreadable JSON or
workbook, wrong top-level shape) discards the whole batch.
"""

from __future__ import annotations

import io
import json
import zipfile
from dataclasses import dataclass, field
from typing import Any, BinaryIO, List, Optional, Union

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

FORMAT_CSV = 'csv'
FORMAT_JSON = 'json'
FORMAT_XLSX = 'xlsx'
SUPPORTED_FORMATS = (FORMAT_CSV, FORMAT_JSON, FORMAT_XLSX)

SPREADSHEET_COLUMNS = ('word', 'meaning', 'example')


@dataclass(frozen=True)
class ImportRow:
    word: str
    meaning: str
    example: Optional[str] = None

    def to_dict(self) -> dict:
        data = {'word': self.word, 'meaning': self.meaning}
        if self.example is not None:
            data['example'] = self.example
        return data


@dataclass
class ParseResult:
    rows: List[ImportRow] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @classmethod
    def failed(cls, message: str) -> 'ParseResult':
        return cls(rows=[], errors=[message])

    def to_dict(self) -> dict:
        return {
            'vocabulary': [row.to_dict() for row in self.rows],
            'errors': list(self.errors),
            'count': len(self.rows),
        }


def split_delimited_line(line: str, delimiter: str = ',') -> List[str]:
    """Split one line on ``delimiter`` while respecting double quotes.

    Every quote toggles the quoted state and is dropped from the output.
    Fields are trimmed.
    """
    fields = []
    current = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append(''.join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append(''.join(current).strip())
    return fields


def parse_delimited(text: str, delimiter: str = ',') -> ParseResult:
    """Parse ``word,meaning[,example]`` lines.

    Line numbers in errors are 1-based and count blank lines.
    """
    result = ParseResult()
    for number, line in enumerate(text.strip().split('\n'), start=1):
        if not line.strip():
            continue

        parts = split_delimited_line(line, delimiter)
        if len(parts) < 2:
            result.errors.append(f"Line {number}: Must have at least word and meaning")
            continue

        word, meaning = parts[0], parts[1]
        example = parts[2] if len(parts) > 2 else ''
        if not word or not meaning:
            result.errors.append(f"Line {number}: Word and meaning cannot be empty")
            continue

        result.rows.append(ImportRow(word=word, meaning=meaning, example=example or None))
    return result


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def parse_structured(content: Union[str, list], format_name: str = 'JSON') -> ParseResult:
    """Parse an array of ``{word, meaning, example?}`` objects.

    ``content`` may be raw JSON text or an already decoded value.
    """
    if isinstance(content, str):
        try:
            data = json.loads(content)
        except ValueError:
            return ParseResult.failed(f"Invalid {format_name} format")
    else:
        data = content

    if not isinstance(data, list):
        return ParseResult.failed(f"{format_name} must be an array of vocabulary objects")

    result = ParseResult()
    for number, item in enumerate(data, start=1):
        if not isinstance(item, dict) or not item.get('word') or not item.get('meaning'):
            result.errors.append(f"Item {number}: Must have word and meaning properties")
            continue
        example = item.get('example')
        result.rows.append(ImportRow(
            word=_to_text(item['word']),
            meaning=_to_text(item['meaning']),
            example=_to_text(example) if example else None,
        ))
    return result


def _cell_text(value: Any) -> str:
    if value is None or pd.isna(value):
        return ''
    return str(value).strip()


def parse_spreadsheet(source: Union[str, BinaryIO]) -> ParseResult:
    """Parse the first sheet of an ``.xlsx`` workbook.

    Headers are matched case-insensitively; ``word`` and ``meaning`` are
    required. Row numbers in errors are spreadsheet rows (header is row 1).
    """
    try:
        df = pd.read_excel(source, sheet_name=0, engine='openpyxl', dtype=str)
    except (ValueError, KeyError, OSError, zipfile.BadZipFile, InvalidFileException):
        return ParseResult.failed("Invalid XLSX format")

    df.columns = [str(column).strip().lower() for column in df.columns]
    if 'word' not in df.columns or 'meaning' not in df.columns:
        return ParseResult.failed("Invalid XLSX format")

    result = ParseResult()
    for number, (_, row) in enumerate(df.iterrows(), start=2):
        word = _cell_text(row['word'])
        meaning = _cell_text(row['meaning'])
        example = _cell_text(row['example']) if 'example' in df.columns else ''

        if not word and not meaning and not example:
            continue
        if not word or not meaning:
            result.errors.append(f"Row {number}: Word and meaning cannot be empty")
            continue
        result.rows.append(ImportRow(word=word, meaning=meaning, example=example or None))
    return result


def parse_import(format_name: str, content: Any) -> ParseResult:
    """Dispatch to the parser for ``format_name`` (csv, json or xlsx)."""
    format_name = (format_name or '').lower()
    if format_name == FORMAT_CSV:
        if isinstance(content, bytes):
            content = content.decode('utf-8-sig')
        return parse_delimited(content or '')
    if format_name == FORMAT_JSON:
        if isinstance(content, bytes):
            content = content.decode('utf-8-sig')
        return parse_structured(content, 'JSON')
    if format_name == FORMAT_XLSX:
        if isinstance(content, bytes):
            content = io.BytesIO(content)
        return parse_spreadsheet(content)
    raise ValueError(f"Unsupported import format: {format_name}")
