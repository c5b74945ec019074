# ===== SECTION: IMPORTS =====
import json
import re
from typing import List

from ..constants import GENERATED_HEADER
from ..errors import ConfigurationError
from ..sql_models import EnumDeclaration
from .base import EnumRenderer


# ===== SECTION: CONSTANTS =====

GO_KEYWORDS = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type", "var",
})

GO_PACKAGE_NAME_REGEX = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


# ===== SECTION: TEMPLATES =====
# Go output is written already in gofmt layout: tab indentation, aligned const block.

GO_PREAMBLE = f"""// {GENERATED_HEADER}

package {{package_name}}

import (
\t"database/sql/driver"
\t"fmt"
)
"""

GO_METHODS = """
func (e {type_name}) IsValid() bool {{
\tfor _, val := range e.ValidValues() {{
\t\tif val == string(e) {{
\t\t\treturn true
\t\t}}
\t}}
\treturn false
}}

func (e {type_name}) ValidValues() []string {{
\treturn []string{{
{value_lines}
\t}}
}}

func (e *{type_name}) Scan(src interface{{}}) error {{
\tswitch source := src.(type) {{
\tcase string:
\t\t*e = {type_name}(source)
\tcase []byte:
\t\t*e = {type_name}(source)
\tdefault:
\t\treturn fmt.Errorf("invalid value for %s: %v", "{type_name}", src)
\t}}
\treturn nil
}}

func (e {type_name}) Value() (driver.Value, error) {{
\tif !e.IsValid() {{
\t\treturn nil, fmt.Errorf("invalid value for %s", "{type_name}")
\t}}
\treturn string(e), nil
}}
"""


# ===== SECTION: FUNCTIONS =====


def go_string_literal(value: str) -> str:
    """Quote a value as a Go interpreted string literal."""
    # JSON string escapes are a subset of Go's
    return json.dumps(value, ensure_ascii=False)


class GoRenderer(EnumRenderer):
    """Renders each enum as a Go string type with constants and database/sql methods."""

    language = "go"
    separator = "\n"

    def __init__(self, package_name: str = ""):
        if (
            not GO_PACKAGE_NAME_REGEX.fullmatch(package_name)
            or package_name == "_"
            or package_name in GO_KEYWORDS
        ):
            raise ConfigurationError(f"A valid Go package name is required, got '{package_name}'")
        super().__init__(package_name)

    def render(self, declaration: EnumDeclaration, is_first: bool) -> str:
        names = declaration.constant_names()
        self.check_identifiers(declaration, names)

        type_name = declaration.type_name
        literals = [go_string_literal(literal) for literal in declaration.literals()]
        width = max(len(name) for name in names)

        lines: List[str] = []
        if is_first:
            lines.append(GO_PREAMBLE.format(package_name=self.package_name))
        lines.append(f"type {type_name} string\n")
        lines.append("const (")
        for name, literal in zip(names, literals):
            lines.append(f"\t{name.ljust(width)} {type_name} = {literal}")
        lines.append(")")

        value_lines = "\n".join(f"\t\t{literal}," for literal in literals)
        lines.append(GO_METHODS.format(type_name=type_name, value_lines=value_lines))
        return "\n".join(lines)

    def declared_names(self, declaration: EnumDeclaration) -> List[str]:
        return [declaration.type_name] + declaration.constant_names()

    def render_empty(self) -> str:
        return f"package {self.package_name}\n"
