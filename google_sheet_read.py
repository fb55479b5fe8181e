import logging
import os
from typing import List, Optional

import gspread
from google.auth.exceptions import GoogleAuthError
from gspread.exceptions import GSpreadException

from errors import DataSourceError

API_KEY_ENV = 'GSLOC_API_KEY'


def authorize(service_account_file: Optional[str] = None) -> gspread.client.Client:
    """
    Return a gspread client.

    Uses the service account file when given, otherwise an API key from
    GSLOC_API_KEY (public sheets only), otherwise gspread's default
    service account location.
    """
    if service_account_file:
        return gspread.service_account(filename=service_account_file)
    api_key = os.getenv(API_KEY_ENV)
    if api_key:
        logging.info('No service account configured, using API key from %s', API_KEY_ENV)
        return gspread.api_key(api_key)
    return gspread.service_account()


def fetch_sheet_values(
    spreadsheet_id: str,
    sheet_name: str,
    service_account_file: Optional[str] = None,
) -> List[List[str]]:
    """Fetch every cell value of one worksheet as a list of rows."""
    try:
        gc = authorize(service_account_file)
        sh = gc.open_by_key(spreadsheet_id)
        ws = sh.worksheet(sheet_name)
        rows = ws.get_all_values()
    except (GSpreadException, GoogleAuthError, OSError, ValueError) as e:
        raise DataSourceError(f'unable to retrieve data from sheet: {e}') from e

    if not rows:
        raise DataSourceError('no data found')
    logging.info('Fetched %d rows from %s/%s', len(rows), spreadsheet_id, sheet_name)
    return rows
