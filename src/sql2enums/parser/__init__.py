# This file makes parser a package
from .enum_parser import extract
from .parser import parse_enums
from .parser import parse_sql
from .parser import parse_sql_file
from .scanner import scan
from .scanner import scan_text
from .utils import normalize_identifier


__all__ = ["extract", "normalize_identifier", "parse_enums", "parse_sql", "parse_sql_file", "scan", "scan_text"]
