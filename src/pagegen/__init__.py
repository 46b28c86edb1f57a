"""
PageGen - typed page model generator for UI test automation.

Compiles line-oriented ``.pagemodel`` descriptions of UI screens into Java
page model classes with element accessors and navigation-aware testers.
"""

from __future__ import annotations

from ._version import get_version
from .codegen import JavaWriter, generate_java
from .core import ir
from .core.errors import (
    ConfigError,
    LocatorUnderspecifiedError,
    PagegenError,
    StructuralError,
)
from .core.parser import parse_pagemodel, read_pagemodel
from .generator import (
    GenerationReport,
    compile_pagemodel,
    generate_page_models,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "PagegenError",
    "StructuralError",
    "LocatorUnderspecifiedError",
    "ConfigError",
    "parse_pagemodel",
    "read_pagemodel",
    "JavaWriter",
    "generate_java",
    "compile_pagemodel",
    "generate_page_models",
    "GenerationReport",
]
