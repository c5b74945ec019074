"""sql2enums - Generate typed enum code from SQL CREATE TYPE ... AS ENUM statements"""

__version__ = "0.1.0"

from . import constants
from . import generator
from . import parser
from . import sql_models

# Re-export the main entry points
from .generator import generate_code
from .parser import parse_sql
from .parser import parse_sql_file
from .sql_models import EnumDeclaration
from .sql_models import ScannerOptions


__all__ = ["EnumDeclaration", "ScannerOptions", "generate_code", "parse_sql", "parse_sql_file"]
