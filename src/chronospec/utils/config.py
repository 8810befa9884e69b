"""
Configuration constants to replace magic numbers throughout chronospec
"""

# Parser configuration constants
GRAMMAR_FILE = "grammar.lark"
GRAMMAR_START_RULE = "start"
PARSER_ALGORITHM = "earley"   # Ordered alternatives with unbounded lookahead
PARSER_LEXER = "dynamic"      # Greedy terminal matching at each position

# Range constants
OPEN_STEP = -1      # Step of a range whose bounds depend on calendar context
DEFAULT_STEP = 1

# Wildcard digit in masks
WILDCARD = "X"

# Display and formatting constants
ERROR_POINTER_CHAR = "^"
ERROR_CONTEXT_PREFIX = "  "

# CLI constants
DEFAULT_OCCURRENCE_COUNT = 5
MAX_OCCURRENCE_COUNT = 10_000

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"
SPEC_COMMENT_PREFIX = "#"
