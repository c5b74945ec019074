# ===== SECTION: IMPORTS AND SETUP =====
import logging
from typing import Dict, Iterable, Type

from ..errors import CodeGenerationError, ConfigurationError
from ..sql_models import EnumDeclaration
from .base import EnumRenderer
from .go_generator import GoRenderer
from .python_generator import PythonRenderer


# ===== SECTION: RENDERER REGISTRY =====
RENDERERS: Dict[str, Type[EnumRenderer]] = {
    GoRenderer.language: GoRenderer,
    PythonRenderer.language: PythonRenderer,
}


def get_renderer(language: str, package_name: str = "") -> EnumRenderer:
    """
    Instantiate the renderer registered for `language`.

    Raises:
        ConfigurationError: If no renderer is registered for the language, or
            the renderer rejects the package name
    """
    try:
        renderer_class = RENDERERS[language.lower()]
    except KeyError:
        known = ", ".join(sorted(RENDERERS))
        raise ConfigurationError(f"Unknown target language '{language}' (expected one of: {known})") from None
    return renderer_class(package_name)


# ===== SECTION: CODE GENERATION =====


def generate_code(declarations: Iterable[EnumDeclaration], renderer: EnumRenderer) -> str:
    """
    Generates the full output module for the given enum declarations.

    Args:
        declarations (Iterable[EnumDeclaration]): Declarations in source order
        renderer (EnumRenderer): Target language renderer

    Returns:
        str: Complete source text; the renderer's empty unit when there are
        no declarations

    Raises:
        CodeGenerationError: If a declaration cannot be rendered, or two
            declarations declare the same top-level identifier
    """
    chunks = []
    declared = {}

    for declaration in declarations:
        chunks.append(renderer.render(declaration, is_first=not chunks))

        # Types and constants share one namespace in the generated module
        for name in renderer.declared_names(declaration):
            if name in declared:
                raise CodeGenerationError(
                    f"Identifier '{name}' is already declared by type '{declared[name]}'",
                    type_name=declaration.type_name,
                )
            declared[name] = declaration.type_name
        logging.debug(f"Rendered {renderer.language} code for enum type '{declaration.type_name}'")

    if not chunks:
        logging.warning("No ENUM types found. Output will be an empty module.")
        return renderer.render_empty()

    return renderer.separator.join(chunks)
