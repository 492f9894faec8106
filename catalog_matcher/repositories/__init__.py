"""Repositories - 기준 사전 적재"""

from .dictionary_repository import load_dictionary, parse_dictionary_rows

__all__ = ["load_dictionary", "parse_dictionary_rows"]
