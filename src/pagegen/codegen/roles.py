"""
Type-parameter resolution for generated page model classes.

Every generated class is written in one of six roles (see ``WriterRole``).
The role decides which Java type names and expressions the class uses:

- ``page_type``: first generic argument of element testers
- ``same_page_type``: second generic argument of a non-navigating tester,
  i.e. the type ``self_expr`` evaluates to
- ``nav_type`` / ``nav_value``: type and value of the ``P`` (return to the
  owning page) navigation target
- ``self_expr``: object handed to ``ClickAction`` as the current page
- ``owner_page_type``: the page type that owns this class

Nested components and sections have no page type of their own. They find it
by walking up the ancestor chain, and the answer depends on the role of each
ancestor on the way.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pagegen.core.ir import ModelKind, ModelNode, ModelTree, WriterRole

# Type variable bound to the owning page in abstract pages, components and sections
PAGE_VAR = "P"
# Type variable bound to the return object of a component
RETURN_VAR = "R"

NameFn = Callable[[str, str], str]


def owner_page_type(tree: ModelTree, node: ModelNode) -> str:
    """
    Resolve the page type that owns ``node``.

    Top-level classes answer from their own kind. Nested classes answer from
    their parent:

    - a page parent is the owner itself
    - an abstract page parent exposes its ``P`` variable
    - a top-level component parent exposes ``P``; a nested one defers to its
      own owner
    - a top-level section parent is ``Section<P>``; a nested section's page
      type is already fixed, so it is used bare
    """
    parent = tree.parent_of(node)
    if parent is None:
        return node.name if node.kind == ModelKind.PAGE else PAGE_VAR

    if parent.kind == ModelKind.PAGE:
        return parent.name
    if parent.kind == ModelKind.ABSTRACT_PAGE:
        return PAGE_VAR
    if parent.kind == ModelKind.COMPONENT:
        return PAGE_VAR if parent.is_root else owner_page_type(tree, parent)
    return f"{parent.name}<{PAGE_VAR}>" if parent.is_root else parent.name


@dataclass(frozen=True)
class RoleStrategy:
    """
    Pure naming functions for one writer role.

    Each function takes the class name and its resolved owner page type.
    """

    page_type: NameFn
    same_page_type: NameFn
    nav_type: NameFn
    self_expr: NameFn
    nav_value: NameFn


def _cast_page(name: str, owner: str) -> str:
    return f"({owner})page"


def _section_self(name: str, owner: str) -> str:
    return f"{name}<{PAGE_VAR}>"


_PAGE = RoleStrategy(
    page_type=lambda name, owner: name,
    same_page_type=lambda name, owner: name,
    nav_type=lambda name, owner: name,
    self_expr=lambda name, owner: "this",
    nav_value=lambda name, owner: "this",
)

_ABSTRACT_PAGE = RoleStrategy(
    page_type=lambda name, owner: PAGE_VAR,
    same_page_type=lambda name, owner: PAGE_VAR,
    nav_type=lambda name, owner: PAGE_VAR,
    self_expr=lambda name, owner: f"({PAGE_VAR})this",
    nav_value=lambda name, owner: f"({PAGE_VAR})this",
)

# Components always act on their owning page, top-level or nested
_COMPONENT = RoleStrategy(
    page_type=lambda name, owner: RETURN_VAR,
    same_page_type=lambda name, owner: owner,
    nav_type=lambda name, owner: owner,
    self_expr=_cast_page,
    nav_value=_cast_page,
)

_SECTION = RoleStrategy(
    page_type=_section_self,
    same_page_type=_section_self,
    nav_type=lambda name, owner: owner,
    self_expr=lambda name, owner: "this",
    nav_value=lambda name, owner: "parentPage",
)

_INNER_SECTION = RoleStrategy(
    page_type=lambda name, owner: name,
    same_page_type=lambda name, owner: name,
    nav_type=lambda name, owner: owner,
    self_expr=lambda name, owner: "this",
    nav_value=lambda name, owner: "parentPage",
)

ROLE_STRATEGIES: dict[WriterRole, RoleStrategy] = {
    WriterRole.PAGE: _PAGE,
    WriterRole.ABSTRACT_PAGE: _ABSTRACT_PAGE,
    WriterRole.COMPONENT: _COMPONENT,
    WriterRole.INNER_COMPONENT: _COMPONENT,
    WriterRole.SECTION: _SECTION,
    WriterRole.INNER_SECTION: _INNER_SECTION,
}


@dataclass(frozen=True)
class ResolvedTypes:
    """Type names and expressions resolved for one node."""

    name: str
    role: WriterRole
    owner_page_type: str
    page_type: str
    same_page_type: str
    nav_type: str
    self_expr: str
    nav_value: str

    @property
    def section_adapter(self) -> str:
        """Name of the inner class exposing a component as a section."""
        return f"{self.name}_section"


def resolve_types(tree: ModelTree, node: ModelNode) -> ResolvedTypes:
    """Resolve every role-dependent name for ``node``."""
    role = node.role
    strategy = ROLE_STRATEGIES[role]
    owner = owner_page_type(tree, node)
    name = node.name
    return ResolvedTypes(
        name=name,
        role=role,
        owner_page_type=owner,
        page_type=strategy.page_type(name, owner),
        same_page_type=strategy.same_page_type(name, owner),
        nav_type=strategy.nav_type(name, owner),
        self_expr=strategy.self_expr(name, owner),
        nav_value=strategy.nav_value(name, owner),
    )
