"""
Parser

Turns a specification string into a token tree with the Lark grammar in
grammar.lark and the TokenTransformer.
"""

import logging
from pathlib import Path
from typing import Optional

from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError

from .transformer import TokenTransformer
from ..shared.errors import ChronospecError, ParseError
from ..shared.tokens import Token
from ..utils.config import GRAMMAR_FILE, GRAMMAR_START_RULE, PARSER_ALGORITHM, PARSER_LEXER

logger = logging.getLogger("chronospec.frontend.parser")


class Parser:
    """
    Extended ISO 8601 parser.

    - Takes a specification string, returns the token tree
    - Must consume the entire input
    - Reports failures as ParseError carrying the unparsed remainder
    """

    def __init__(self):
        grammar_path = Path(__file__).parent / GRAMMAR_FILE
        self.parser = Lark.open(
            grammar_path,
            start=GRAMMAR_START_RULE,
            parser=PARSER_ALGORITHM,
            lexer=PARSER_LEXER,
            maybe_placeholders=False,
        )
        self.transformer = TokenTransformer()

    def parse(self, text: str) -> Token:
        """
        Parse ``text`` to a token tree.

        Raises ParseError; no partial tree is ever returned.
        """
        try:
            tree = self.parser.parse(text)
        except UnexpectedInput as e:
            logger.debug("Lark rejected %r: %s", text, e)
            raise self._parse_error(text) from e

        try:
            tokens = self.transformer.transform(tree)
        except VisitError as e:
            cause = e.orig_exc
            if isinstance(cause, ChronospecError):
                raise ParseError(
                    f"Could not parse {text!r}. {cause.message}", text, text
                ) from cause
            if isinstance(cause, ValueError):
                logger.debug("Transformer rejected %r: %s", text, cause)
                raise ParseError(f"Could not parse {text!r}. {cause}", text, text) from cause
            raise

        logger.debug("Parsed %r to %r", text, tokens)
        return tokens

    def _parse_error(self, text: str) -> ParseError:
        """
        Error for input the grammar rejects. The remainder is whatever
        follows the longest prefix of ``text`` that parses on its own.
        """
        consumed = self._longest_valid_prefix(text)
        remainder = text[consumed:]
        return ParseError(
            f"Could not parse {text!r}. Error detected at {remainder!r}", text, remainder
        )

    def _longest_valid_prefix(self, text: str) -> int:
        for end in range(len(text) - 1, 0, -1):
            try:
                self.parser.parse(text[:end])
            except UnexpectedInput:
                continue
            return end
        return 0


_parser: Optional[Parser] = None


def get_parser() -> Parser:
    """Shared parser instance; the grammar is compiled on first use"""
    global _parser
    if _parser is None:
        _parser = Parser()
    return _parser


def tokenize(text: str) -> Token:
    """Parse an extended ISO 8601 specification into its token tree"""
    return get_parser().parse(text)
