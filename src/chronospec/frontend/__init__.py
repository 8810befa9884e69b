"""
Frontend: extended ISO 8601 text to token tree
"""

from .parser import Parser, get_parser, tokenize
from .transformer import TokenTransformer

__all__ = ["Parser", "get_parser", "tokenize", "TokenTransformer"]
