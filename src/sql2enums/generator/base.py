# ===== SECTION: IMPORTS =====
from abc import ABC, abstractmethod
from typing import List

from ..errors import CodeGenerationError
from ..sql_models import EnumDeclaration


# ===== SECTION: RENDERER INTERFACE =====

class EnumRenderer(ABC):
    """
    Renders enum declarations as source code for one target language.

    Subclasses implement `render` for a single declaration and `render_empty`
    for the output written when the input has no enum types. `separator` is
    placed between the rendered declarations.
    """

    language: str = ""
    separator: str = "\n"

    def __init__(self, package_name: str = ""):
        self.package_name = package_name

    @abstractmethod
    def render(self, declaration: EnumDeclaration, is_first: bool) -> str:
        """
        Render one declaration.

        Args:
            declaration (EnumDeclaration): The enum to render
            is_first (bool): True for the first declaration of the output;
                the shared preamble (header, package, imports) is written then

        Returns:
            str: Source text ending with a newline

        Raises:
            CodeGenerationError: If the declaration cannot be rendered as valid code
        """

    @abstractmethod
    def render_empty(self) -> str:
        """Minimal valid output unit for an input without enum types."""

    def declared_names(self, declaration: EnumDeclaration) -> List[str]:
        """Top-level names the rendered declaration adds to the output module."""
        return [declaration.type_name]

    def check_identifiers(self, declaration: EnumDeclaration, names: List[str]) -> None:
        """Raise CodeGenerationError for empty, invalid or duplicate identifiers."""
        if not declaration.type_name.isidentifier():
            raise CodeGenerationError("Invalid type identifier", type_name=declaration.type_name or declaration.sql_name)

        seen = set()
        for value, literal, name in zip(declaration.values, declaration.literals(), names):
            if not value:
                raise CodeGenerationError("Enum value normalizes to an empty identifier", declaration.type_name, literal)
            if not name.isidentifier():
                raise CodeGenerationError(f"Invalid {self.language} identifier '{name}'", declaration.type_name, literal)
            if name in seen:
                raise CodeGenerationError(f"Duplicate {self.language} identifier '{name}'", declaration.type_name, literal)
            seen.add(name)
