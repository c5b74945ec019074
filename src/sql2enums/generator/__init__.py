# This file makes generator a package
from .base import EnumRenderer
from .core import RENDERERS
from .core import generate_code
from .core import get_renderer
from .go_generator import GoRenderer
from .python_generator import PythonRenderer


__all__ = ["EnumRenderer", "GoRenderer", "PythonRenderer", "RENDERERS", "generate_code", "get_renderer"]
