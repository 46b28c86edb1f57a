"""
PageGen Internal Representation (IR) types.

A compiled page model file becomes a ``ModelTree``: an arena of ``ModelNode``
objects addressed by index. Each node corresponds to one generated Java
class. Nodes reference their parent and children by arena index, so ancestor
walks stay O(depth) without reference cycles.

Element-level types (``ElementSpec``, ``LocatorArgument``) are frozen once
built. Nodes and code blocks are filled in by the parser while it reads the
file and are treated as read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Model Kinds and Writer Roles
# =============================================================================


class ModelKind(str, Enum):
    """Kinds of page model, named after their DSL keywords."""

    PAGE = "PageModel"
    ABSTRACT_PAGE = "AbstractPageModel"
    COMPONENT = "ComponentModel"
    SECTION = "SectionModel"

    @property
    def is_page(self) -> bool:
        return self in (ModelKind.PAGE, ModelKind.ABSTRACT_PAGE)


class WriterRole(str, Enum):
    """
    Code generation role of a node.

    Derived from the node kind and whether the node is the root of its file.
    Selects the generic wiring used by the resolver and the Java writer.
    """

    PAGE = "page"
    ABSTRACT_PAGE = "abstract_page"
    COMPONENT = "component"
    INNER_COMPONENT = "inner_component"
    SECTION = "section"
    INNER_SECTION = "inner_section"

    @classmethod
    def for_kind(cls, kind: ModelKind, is_root: bool) -> WriterRole:
        if kind == ModelKind.PAGE:
            return cls.PAGE
        if kind == ModelKind.ABSTRACT_PAGE:
            return cls.ABSTRACT_PAGE
        if kind == ModelKind.COMPONENT:
            return cls.COMPONENT if is_root else cls.INNER_COMPONENT
        return cls.SECTION if is_root else cls.INNER_SECTION

    @property
    def is_component(self) -> bool:
        return self in (WriterRole.COMPONENT, WriterRole.INNER_COMPONENT)


# =============================================================================
# Elements
# =============================================================================


class LocatorArgKind(str, Enum):
    """Java type of a locator placeholder."""

    STRING = "String"
    INT = "int"


class LocatorArgument(BaseModel):
    """
    A placeholder variable inside a locator pattern.

    ``s%userId%`` becomes ``LocatorArgument(name="userId", kind=STRING)`` and
    is exposed as a ``String userId`` parameter on the generated methods.
    """

    name: str
    kind: LocatorArgKind

    model_config = ConfigDict(frozen=True)

    @property
    def java_param(self) -> str:
        return f"{self.kind.value} {self.name}"


class LocatorTemplate(BaseModel):
    """
    A locator pattern with its placeholders extracted.

    Attributes:
        pattern: Locator text as written in the DSL
        template: Pattern with each placeholder spliced as a string
            concatenation, ready to be wrapped in double quotes
        args: Placeholders in left-to-right order
    """

    pattern: str
    template: str
    args: list[LocatorArgument] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def java_params(self) -> str:
        return ", ".join(arg.java_param for arg in self.args)

    @property
    def call_args(self) -> str:
        return ", ".join(arg.name for arg in self.args)


FIND_PAGE_ELEMENT = "findPageElement"
FIND_COMPONENT_ELEMENT = "findComponentElement"
DEFAULT_DISPLAY_TEST = ".isDisplayed()"
SELF_NAVIGATION = "P"


class ElementSpec(BaseModel):
    """
    One element line of a page model.

    Attributes:
        name: Element name, used in the get/test method names
        displayed: Whether the element takes part in testModelDisplayed()
        display_test: Assertion chained onto the tester in testModelDisplayed()
        tester_type: Tester class token, with 0-3 leading ``@`` sigils
        by_type: Selenium ``By`` strategy (id, cssSelector, xpath, ...)
        find_method: Lookup method, page scoped or component scoped
        locator: Locator pattern and its placeholders
        click_modifier: Code appended to the click action
        return_type: Navigation target token (``Type``, ``Type:Method``,
            ``P`` or ``P:Method``)
    """

    name: str
    displayed: bool = False
    display_test: str = DEFAULT_DISPLAY_TEST
    tester_type: str
    by_type: str
    find_method: str = FIND_PAGE_ELEMENT
    locator: LocatorTemplate
    click_modifier: str | None = None
    return_type: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def navigates(self) -> bool:
        return self.return_type is not None

    @property
    def is_self_navigation(self) -> bool:
        """True for the ``P`` and ``P:Method`` return specs."""
        if self.return_type is None:
            return False
        return self.return_type == SELF_NAVIGATION or self.return_type.startswith(
            SELF_NAVIGATION + ":"
        )

    @property
    def return_target(self) -> str | None:
        if self.return_type is None:
            return None
        return self.return_type.split(":")[0]

    @property
    def chained_method(self) -> str | None:
        if self.return_type is None or ":" not in self.return_type:
            return None
        return self.return_type.split(":")[1]


# =============================================================================
# Embedded Java
# =============================================================================

# Indent unit of generated Java, also used inside stored override blocks
INDENT = "\t"


class CodeBlock(BaseModel):
    """
    A block of Java copied verbatim into a generated class.

    Override blocks (``%methodName``) carry synthesized ``@Override`` and
    method signature lines; anonymous blocks (``%%start``) carry only the
    raw lines.
    """

    is_override: bool = False
    method_name: str | None = None
    lines: list[str] = Field(default_factory=list)


# =============================================================================
# Model Tree
# =============================================================================


class ModelNode(BaseModel):
    """
    One page model class: the root of a file or a nested component/section.

    Attributes:
        index: Slot of this node in its ModelTree
        name: Class name
        kind: Page model kind
        superclass: Class the generated class extends
        package: Java package, identical for every node of a file
        imports: Extra import statements, as written
        elements: Element declarations in source order
        code_blocks: Embedded Java blocks in source order
        children: Arena indices of nested components/sections
        parent: Arena index of the enclosing node, None at the root
    """

    index: int
    name: str
    kind: ModelKind
    superclass: str
    package: str
    imports: list[str] = Field(default_factory=list)
    elements: list[ElementSpec] = Field(default_factory=list)
    code_blocks: list[CodeBlock] = Field(default_factory=list)
    children: list[int] = Field(default_factory=list)
    parent: int | None = None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def role(self) -> WriterRole:
        return WriterRole.for_kind(self.kind, self.is_root)

    @property
    def has_displayed_elements(self) -> bool:
        return any(elem.displayed for elem in self.elements)


class ModelTree(BaseModel):
    """
    Arena holding every node of one compiled page model file.

    ``nodes[0]`` is always the root.
    """

    nodes: list[ModelNode] = Field(default_factory=list)

    @property
    def root(self) -> ModelNode:
        return self.nodes[0]

    def add_node(
        self,
        name: str,
        kind: ModelKind,
        superclass: str,
        package: str,
        parent: ModelNode | None = None,
    ) -> ModelNode:
        """Create a node, link it below ``parent`` and return it."""
        node = ModelNode(
            index=len(self.nodes),
            name=name,
            kind=kind,
            superclass=superclass,
            package=package,
            parent=parent.index if parent is not None else None,
        )
        self.nodes.append(node)
        if parent is not None:
            parent.children.append(node.index)
        return node

    def parent_of(self, node: ModelNode) -> ModelNode | None:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def children_of(self, node: ModelNode) -> list[ModelNode]:
        return [self.nodes[i] for i in node.children]

    def ancestors(self, node: ModelNode) -> Iterator[ModelNode]:
        """Yield the enclosing nodes of ``node``, nearest first."""
        parent = self.parent_of(node)
        while parent is not None:
            yield parent
            parent = self.parent_of(parent)

    def walk(self, node: ModelNode | None = None) -> Iterator[ModelNode]:
        """Depth-first traversal in declaration order."""
        node = node if node is not None else self.root
        yield node
        for child in self.children_of(node):
            yield from self.walk(child)
