"""Core PageGen functionality: IR, tokenizer, parser, configuration."""

from . import ir
from .errors import (
    ConfigError,
    ErrorContext,
    LocatorUnderspecifiedError,
    PagegenError,
    StructuralError,
)
from .lexer import tokenize_line
from .locators import extract_locator
from .manifest import ProjectManifest, load_manifest
from .parser import parse_pagemodel, read_pagemodel

__all__ = [
    "ir",
    "PagegenError",
    "StructuralError",
    "LocatorUnderspecifiedError",
    "ConfigError",
    "ErrorContext",
    "tokenize_line",
    "extract_locator",
    "parse_pagemodel",
    "read_pagemodel",
    "ProjectManifest",
    "load_manifest",
]
