import re

from server.errors import ValidationError

NON_DIGITS = re.compile(r'[^0-9]')
CEP_LENGTH = 8


def normalize_cep(value: str) -> str:
    return NON_DIGITS.sub('', value)


def is_valid_cep(value: str) -> bool:
    """Separators are dropped before counting, so '01310-100' is valid."""
    return len(normalize_cep(value)) == CEP_LENGTH


def validate_cep(value: str) -> str:
    if not is_valid_cep(value):
        raise ValidationError(f'invalid zipcode {value!r}')
    return normalize_cep(value)
