# Common utilities
from .config_loader import (
    get_currency_symbol,
    get_storage_settings,
    load_config,
    load_settings,
)
from .csv_utils import configure_csv, parse_csv_bytes, parse_csv_text
from .log_config import setup_logging
from .text_utils import html_to_text, split_tags
