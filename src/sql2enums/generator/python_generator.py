# ===== SECTION: IMPORTS AND SETUP =====
# Standard library and third-party imports
import keyword

import inflection

# Local imports
from ..constants import GENERATED_HEADER
from ..errors import CodeGenerationError
from ..sql_models import EnumDeclaration
from .base import EnumRenderer


# ===== SECTION: TEMPLATES =====

PYTHON_PREAMBLE = f'''"""{GENERATED_HEADER}"""

from enum import Enum
from typing import List, Union

'''

# Names bound by PYTHON_PREAMBLE; a class with one of these names would shadow it
PREAMBLE_NAMES = frozenset({"Enum", "List", "Union"})

PYTHON_METHODS = '''
    @classmethod
    def is_valid(cls, value: str) -> bool:
        return any(member.value == value for member in cls)

    @classmethod
    def valid_values(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def from_db(cls, value: Union[str, bytes]) -> "{class_name}":
        if isinstance(value, bytes):
            value = value.decode()
        if not isinstance(value, str):
            raise TypeError(f"invalid value for {class_name}: {{value!r}}")
        return cls(value)

    def to_db(self) -> str:
        return self.value
'''


# ===== SECTION: FUNCTIONS =====


def _member_name(value: str) -> str:
    """CamelCase enum value to an UPPER_SNAKE_CASE member name ('OnHold' -> 'ON_HOLD')."""
    return inflection.underscore(value).upper()


def _generate_enum_class(declaration: EnumDeclaration) -> str:
    """
    Generates a Python Enum class definition string from an enum declaration.

    Args:
        declaration (EnumDeclaration): Parsed SQL ENUM type

    Returns:
        str: Python code for the Enum class definition as a string
    """
    class_name = declaration.type_name

    members = []
    for value, literal in zip(declaration.values, declaration.literals()):
        members.append(f"    {_member_name(value)} = {literal!r}")

    members_str = "\n".join(members)
    methods_str = PYTHON_METHODS.format(class_name=class_name)

    return f"class {class_name}(str, Enum):\n{members_str}\n{methods_str}"


class PythonRenderer(EnumRenderer):
    """Renders each enum as a str-backed Python Enum class."""

    language = "python"
    separator = "\n\n"

    def render(self, declaration: EnumDeclaration, is_first: bool) -> str:
        if keyword.iskeyword(declaration.type_name):
            raise CodeGenerationError("Type name is a Python keyword", type_name=declaration.type_name)
        if declaration.type_name in PREAMBLE_NAMES:
            raise CodeGenerationError(
                "Type name shadows a name imported by the generated module", type_name=declaration.type_name
            )
        self.check_identifiers(declaration, [_member_name(value) for value in declaration.values])

        class_code = _generate_enum_class(declaration)
        if is_first:
            return f"{PYTHON_PREAMBLE}\n{class_code}"
        return class_code

    def render_empty(self) -> str:
        return f'"""{GENERATED_HEADER}"""\n'
