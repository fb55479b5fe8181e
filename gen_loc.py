import logging
import os
from typing import Dict

from columns import column_index
from config import Config, validate_config
from errors import OutputWriteError
from google_sheet_read import fetch_sheet_values
from locale_writer import write_locale_file
from translations import extract_translations


def gen_loc(config: Config) -> Dict[str, str]:
    """
    Generate one JSON file per configured locale from the sheet.

    The sheet is fetched once; the first error aborts the run.
    Returns a mapping of locale identifier to written file path.
    """
    logging.info('Generating localization files...')
    validate_config(config)

    try:
        os.makedirs(config.output_dir, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"can't create output directory {config.output_dir}: {e}") from e

    rows = fetch_sheet_values(
        config.spreadsheet_id,
        config.sheet_name,
        service_account_file=config.service_account_json or None,
    )
    key_index = column_index(config.keys_column)

    written = {}
    for locale in config.locales:
        logging.info('Generating locale file for %s', locale.locale)
        translations = extract_translations(
            rows, key_index, column_index(locale.column), config.rows_to_skip
        )
        path = write_locale_file(config.output_dir, locale.locale, translations, is_flat=config.is_flat)
        logging.info('Wrote %d keys to %s', len(translations), path)
        written[locale.locale] = path

    logging.info('Localization files generated successfully!')
    return written
