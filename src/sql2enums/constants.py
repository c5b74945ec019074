# ===== SECTION: IMPORTS =====
import re


# ===== SECTION: CONSTANTS =====
# Constants used throughout the sql2enums codebase

# Statement prefix that switches the scanner into capture mode
CREATE_TYPE_KEYWORD = "CREATE TYPE"
CREATE_TYPE_KEYWORD_LENGTH = len(CREATE_TYPE_KEYWORD)

STATEMENT_TERMINATOR = ";"
LINE_COMMENT_MARKER = "-"
QUOTE_CHARS = ("'", '"')

# Regex for CREATE TYPE [schema.]name AS ENUM (...);
ENUM_STATEMENT_REGEX = re.compile(
    r"CREATE TYPE (?:\w+\.)?(\w+)"  # 1: Type name (schema prefix dropped)
    r" AS ENUM\s*\("  # AS ENUM (
    r"([\w',\s]+)"  # 2: Comma separated values
    r"\);",  # Closing parenthesis and terminator
    re.IGNORECASE,
)

# Header written above generated code
GENERATED_HEADER = 'Code generated by "sql2enums"; DO NOT EDIT.'

DEFAULT_LANGUAGE = "go"
