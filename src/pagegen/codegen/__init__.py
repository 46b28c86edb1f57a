"""Java code generation: type resolution, click actions and the writer."""

from .java_writer import JavaWriter, generate_java
from .roles import ResolvedTypes, owner_page_type, resolve_types

__all__ = [
    "JavaWriter",
    "generate_java",
    "ResolvedTypes",
    "owner_page_type",
    "resolve_types",
]
