import logging
import re
from typing import Any, Dict, List, Optional

import yaml

from errors import ConfigValidationError, OutputWriteError

DEFAULT_CONFIG_PATH = './conf.yaml'
DEFAULT_SHEET_NAME = 'Sheet1'

_COLUMN_LABEL = re.compile(r'^[A-Z]+$')


class LocaleColumn:
    """A locale identifier and the sheet column holding its strings."""

    def __init__(self, column: str, locale: str):
        self.column = column
        self.locale = locale

    def to_dict(self) -> Dict[str, str]:
        return {'column': self.column, 'locale': self.locale}

    def __repr__(self):
        return f"LocaleColumn(column={self.column!r}, locale={self.locale!r})"


class Config:
    """Settings for one gen-loc run, as read from the YAML config file."""

    def __init__(
        self,
        spreadsheet_id: str = '',
        keys_column: str = '',
        locales: Optional[List[LocaleColumn]] = None,
        rows_to_skip: int = 0,
        service_account_json: str = '',
        sheet_name: str = DEFAULT_SHEET_NAME,
        output_dir: str = '',
        is_flat: bool = False,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.keys_column = keys_column
        self.locales = locales or []
        self.rows_to_skip = rows_to_skip
        self.service_account_json = service_account_json
        self.sheet_name = sheet_name
        self.output_dir = output_dir
        self.is_flat = is_flat

    def to_dict(self) -> Dict[str, Any]:
        return {
            'spreadsheet_id': self.spreadsheet_id,
            'keys_column': self.keys_column,
            'locales': [lc.to_dict() for lc in self.locales],
            'rows_to_skip': self.rows_to_skip,
            'service_account_json': self.service_account_json,
            'sheet_name': self.sheet_name,
            'output_dir': self.output_dir,
            'is_flat': self.is_flat,
        }


def _column_label(value: Any, field: str) -> str:
    if value is None or value == '':
        return ''
    label = str(value).strip().upper()
    if not _COLUMN_LABEL.match(label):
        raise ConfigValidationError(f"{field} must be a column label like 'A' or 'AB', got {value!r}")
    return label


def _parse_locales(raw: Any) -> List[LocaleColumn]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigValidationError('locales must be a list of {column, locale} entries')
    locales = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise ConfigValidationError(f'locales[{i}] must be a mapping with column and locale')
        column = _column_label(entry.get('column'), f'locales[{i}].column')
        locale = str(entry.get('locale') or '').strip()
        if not column or not locale:
            raise ConfigValidationError(f'locales[{i}] needs both column and locale')
        locales.append(LocaleColumn(column, locale))
    return locales


def config_from_dict(data: Dict[str, Any]) -> Config:
    """Build a Config from a parsed YAML mapping, applying defaults."""
    rows_to_skip = data.get('rows_to_skip') or 0
    if isinstance(rows_to_skip, bool) or not isinstance(rows_to_skip, int) or rows_to_skip < 0:
        raise ConfigValidationError(f'rows_to_skip must be a non-negative integer, got {rows_to_skip!r}')

    is_flat = data.get('is_flat', False)
    if is_flat is None:
        is_flat = False
    if not isinstance(is_flat, bool):
        raise ConfigValidationError(f'is_flat must be true or false, got {is_flat!r}')

    return Config(
        spreadsheet_id=str(data.get('spreadsheet_id') or ''),
        keys_column=_column_label(data.get('keys_column'), 'keys_column'),
        locales=_parse_locales(data.get('locales')),
        rows_to_skip=rows_to_skip,
        service_account_json=str(data.get('service_account_json') or ''),
        sheet_name=str(data.get('sheet_name') or DEFAULT_SHEET_NAME),
        output_dir=str(data.get('output_dir') or ''),
        is_flat=is_flat,
    )


def load_config(path: str = DEFAULT_CONFIG_PATH) -> Config:
    """Read and parse the YAML config at 'path'."""
    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigValidationError(f"can't read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"can't parse config {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigValidationError(f'config {path} must be a YAML mapping')
    logging.debug('Loaded config from %s', path)
    return config_from_dict(data)


def validate_config(config: Config) -> None:
    """Check that every required field is set."""
    if not config.spreadsheet_id:
        raise ConfigValidationError('spreadsheet_id is required')
    if not config.keys_column:
        raise ConfigValidationError('keys_column is required')
    if not config.locales:
        raise ConfigValidationError('locales is required')
    if not config.output_dir:
        raise ConfigValidationError('output_dir is required')


def example_config() -> Config:
    return Config(
        spreadsheet_id='your-spreadsheet-id',
        keys_column='A',
        locales=[LocaleColumn('B', 'en'), LocaleColumn('C', 'de')],
        rows_to_skip=1,
        service_account_json='service-account.json',
        sheet_name=DEFAULT_SHEET_NAME,
        output_dir='./locales',
        is_flat=False,
    )


def generate_config_example(path: str = DEFAULT_CONFIG_PATH) -> str:
    """Write an example config to 'path' and return the path."""
    try:
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(example_config().to_dict(), f, sort_keys=False)
    except OSError as e:
        raise OutputWriteError(f"can't write config file {path}: {e}") from e
    return path
