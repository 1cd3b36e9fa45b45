"""Remote mail-alias provider access."""

from .client import AliasClient
from .generator import generate_random_alias
from .http import extract_error_message, fetch_json, parse_body
from .words import fetch_domain_list, fetch_word_list, normalize_domain, normalize_word

__all__ = [
    'AliasClient',
    'generate_random_alias',
    'extract_error_message',
    'fetch_json',
    'parse_body',
    'fetch_domain_list',
    'fetch_word_list',
    'normalize_domain',
    'normalize_word',
]
