# strings.py
# String helpers shared by page objects and tests

import re
from datetime import datetime
from decimal import Decimal, InvalidOperation

_NUMBER = re.compile(r'\d+\.?\d*')
_PRICE = re.compile(r'\$\d+\.?\d*')
# Characters Windows or POSIX refuse in file names
_UNSAFE_FILE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def generate_unique_string(prefix='test'):
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S_%f')[:-3]
    return f'{prefix}_{timestamp}'


def clean_string(value):
    """Trim, drop carriage returns and turn newlines into spaces."""
    if value is None or not value.strip():
        return ''
    return value.strip().replace('\r', '').replace('\n', ' ')


def extract_decimal(value):
    """First number in the string as a Decimal ('$29.99' -> 29.99), 0 if none."""
    if value is None or not value.strip():
        return Decimal(0)
    match = _NUMBER.search(value)
    if not match:
        return Decimal(0)
    try:
        return Decimal(match.group())
    except InvalidOperation:
        return Decimal(0)


def is_valid_price(value):
    if value is None or not value.strip():
        return False
    return _PRICE.search(value) is not None


def sanitize_file_name(value):
    if value is None or not value.strip():
        return 'unknown'
    return _UNSAFE_FILE_CHARS.sub('_', value.strip()).strip('_') or 'unknown'
