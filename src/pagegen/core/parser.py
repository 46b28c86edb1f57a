"""
Tree builder for PageGen page model files.

Reads a page model line by line and builds a ``ModelTree``. A single cursor
points at the node currently being filled; component and section markers
move it down and up the tree. There is no backtracking: every line is
handled once, in order.

File layout::

    PageModel com.example.pages            <- header: model type + package
    import com.example.tools.MyTester      <- extra imports
    * usernameField id username            <- element lines
    loginButton id login HomePage
    @ComponentModel UserRow                <- nested component
        nameDisplay cssSelector .name
    @EndComponent
    %onPageLoad                            <- override method block
        System.out.println("loaded");
    %end
"""

import logging
from pathlib import Path

from .element_types import infer_tester_type
from .errors import StructuralError, make_locator_error, make_structural_error
from .ir import (
    DEFAULT_DISPLAY_TEST,
    FIND_COMPONENT_ELEMENT,
    FIND_PAGE_ELEMENT,
    INDENT,
    CodeBlock,
    ElementSpec,
    ModelKind,
    ModelNode,
    ModelTree,
)
from .lexer import tokenize_line
from .locators import extract_locator

logger = logging.getLogger(__name__)

PAGEMODEL_EXTENSION = ".pagemodel"

# Header keywords and the runtime classes they extend
KEYWORD_KINDS = {kind.value: kind for kind in ModelKind}
ABSTRACT_PREFIX = "@"
CANONICAL_SUPERCLASSES = {
    ModelKind.PAGE.value: "ExtendedPageModel",
    ModelKind.ABSTRACT_PAGE.value: "ExtendedPageModel",
    ModelKind.SECTION.value: "ExtendedSectionModel",
}

# Nested model markers
OPEN_MARKERS = {
    "@ComponentModel": ModelKind.COMPONENT,
    "@SectionModel": ModelKind.SECTION,
}
CLOSE_MARKERS = ("@EndComponent", "@EndSection")

# Embedded Java markers
BLOCK_SIGIL = "%"
ANONYMOUS_BLOCK_START = "%%start"
ANONYMOUS_BLOCK_END = "%%end"
METHOD_BLOCK_END = "%end"
OVERRIDE_SENTINEL = INDENT + "@Override"

# Element line sigils
COMMENT_PREFIX = "#"
IMPORT_KEYWORD = "import"
DISPLAYED_MARKER = "*"
TESTER_SIGIL = "@"
PAGE_SCOPE_SIGIL = "^"
DISPLAY_TEST_SIGIL = "*"
CLICK_MODIFIER_SIGIL = "_"


def model_name_for(path: Path, extension: str = PAGEMODEL_EXTENSION) -> str:
    """Class name of the root model of a file: the file name minus its extension."""
    name = path.name
    if name.endswith(extension):
        return name[: -len(extension)]
    return path.stem


def superclass_for(keyword: str) -> str:
    """Map a model keyword to its runtime base class; other names pass through."""
    return CANONICAL_SUPERCLASSES.get(keyword, keyword)


class PageModelParser:
    """
    Line-oriented parser producing a ModelTree.

    The parser is single use: create one per file and call ``parse()``.
    """

    def __init__(self, text: str, file: Path, name: str | None = None):
        """
        Initialize parser.

        Args:
            text: Page model source
            file: Source file path (for error reporting)
            name: Root class name (default: derived from the file name)
        """
        self.lines = text.splitlines()
        self.file = file
        self.name = name if name is not None else model_name_for(file)
        self.tree = ModelTree()
        self.current: ModelNode | None = None
        self.in_code_block = False
        self.line_no = 0
        self.line = ""

    def parse(self) -> ModelTree:
        """
        Parse the whole file.

        Returns:
            The populated ModelTree

        Raises:
            StructuralError: If the header is missing or markers are unbalanced
            LocatorUnderspecifiedError: If an element line is incomplete
        """
        for self.line_no, self.line in enumerate(self.lines, start=1):
            if self.current is None:
                if self.line.strip():
                    self.current = self.parse_header(self.line)
            elif self.in_code_block:
                self.parse_code_line(self.line, self.current)
            elif self.line.strip().startswith(BLOCK_SIGIL):
                self.open_code_block(self.line, self.current)
            else:
                self.parse_model_line(self.line)

        if self.current is None:
            raise make_structural_error(
                "Missing header line (expected '<ModelType> <package>')",
                self.file,
                max(self.line_no, 1),
            )
        self._warn_unclosed()
        return self.tree

    # -------------------------------------------------------------------------
    # Header
    # -------------------------------------------------------------------------

    def parse_header(self, line: str) -> ModelNode:
        """Create the root node from the '<ModelType> <package>' line."""
        parts = tokenize_line(line)
        if len(parts) < 2:
            raise self._structural_error(
                "Header must name a model type and a package: '<ModelType> <package>'"
            )
        inherit = parts[0]
        kind = KEYWORD_KINDS.get(inherit, ModelKind.PAGE)
        if inherit.startswith(ABSTRACT_PREFIX):
            inherit = inherit[len(ABSTRACT_PREFIX) :]
            kind = ModelKind.ABSTRACT_PAGE
        return self.tree.add_node(
            name=self.name,
            kind=kind,
            superclass=superclass_for(inherit),
            package=parts[1],
        )

    # -------------------------------------------------------------------------
    # Embedded Java
    # -------------------------------------------------------------------------

    def open_code_block(self, line: str, node: ModelNode) -> None:
        marker = line.strip()
        if marker == ANONYMOUS_BLOCK_START:
            block = CodeBlock()
        else:
            method = marker[len(BLOCK_SIGIL) :]
            block = CodeBlock(
                is_override=True,
                method_name=method,
                lines=[OVERRIDE_SENTINEL, f"{INDENT}public void {method}() {{"],
            )
        node.code_blocks.append(block)
        self.in_code_block = True

    def parse_code_line(self, line: str, node: ModelNode) -> None:
        marker = line.strip()
        block = node.code_blocks[-1]
        if marker == ANONYMOUS_BLOCK_END:
            self.in_code_block = False
        elif marker == METHOD_BLOCK_END:
            block.lines.append(INDENT + "}")
            self.in_code_block = False
        else:
            if block.lines and block.lines[0] == OVERRIDE_SENTINEL:
                line = INDENT + line
            block.lines.append(line)

    # -------------------------------------------------------------------------
    # Model lines
    # -------------------------------------------------------------------------

    def parse_model_line(self, line: str) -> None:
        assert self.current is not None
        parts = tokenize_line(line)
        if not parts or parts[0].startswith(COMMENT_PREFIX):
            return

        first = parts[0]
        if first == IMPORT_KEYWORD:
            statement = line.strip()
            if not statement.endswith(";"):
                statement += ";"
            self.current.imports.append(statement)
        elif first in OPEN_MARKERS:
            if len(parts) < 2:
                raise self._structural_error(f"{first} requires a model name")
            kind = OPEN_MARKERS[first]
            self.current = self.tree.add_node(
                name=parts[1],
                kind=kind,
                superclass=superclass_for(kind.value),
                package=self.current.package,
                parent=self.current,
            )
        elif first in CLOSE_MARKERS:
            parent = self.tree.parent_of(self.current)
            if parent is None:
                raise self._structural_error(f"{first} without a matching open marker")
            self.current = parent
        else:
            self.current.elements.append(self.parse_element(parts, self.current))

    def parse_element(self, parts: list[str], node: ModelNode) -> ElementSpec:
        """
        Parse an element line.

        Grammar::

            [*] name [@Tester] [^]byType locator [*displayTest] [_clickModifier] [ReturnType]
        """
        i = 0
        displayed = False
        if parts[i] == DISPLAYED_MARKER:
            displayed = True
            i += 1

        name = self._required(parts, i, "element name")
        i += 1

        if i < len(parts) and parts[i].startswith(TESTER_SIGIL):
            tester_type = parts[i]
            i += 1
        else:
            tester_type = infer_tester_type(name)

        by_type = self._required(parts, i, "By strategy")
        i += 1
        if not node.kind.is_page:
            find_method = FIND_COMPONENT_ELEMENT
            if by_type.startswith(PAGE_SCOPE_SIGIL):
                by_type = by_type[len(PAGE_SCOPE_SIGIL) :]
                find_method = FIND_PAGE_ELEMENT
        else:
            find_method = FIND_PAGE_ELEMENT
            by_type = by_type.removeprefix(PAGE_SCOPE_SIGIL)

        locator = extract_locator(self._required(parts, i, "locator"))
        i += 1

        display_test = DEFAULT_DISPLAY_TEST
        click_modifier: str | None = None
        return_type: str | None = None
        for token in parts[i:]:
            if token.startswith(DISPLAY_TEST_SIGIL):
                display_test = token[len(DISPLAY_TEST_SIGIL) :]
            elif token.startswith(CLICK_MODIFIER_SIGIL):
                click_modifier = token[len(CLICK_MODIFIER_SIGIL) :] or None
            elif return_type is None:
                return_type = token
            else:
                logger.warning(
                    "%s:%d: unknown element parameter [%s] in line [%s]",
                    self.file,
                    self.line_no,
                    token,
                    " ".join(parts),
                )

        return ElementSpec(
            name=name,
            displayed=displayed,
            display_test=display_test,
            tester_type=tester_type,
            by_type=by_type,
            find_method=find_method,
            locator=locator,
            click_modifier=click_modifier,
            return_type=return_type,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _required(self, parts: list[str], i: int, what: str) -> str:
        if i >= len(parts):
            raise make_locator_error(
                f"Element line is missing its {what}",
                self.file,
                self.line_no,
                snippet=self.line,
                # points just past the last token
                column=len(self.line.rstrip()) + 1,
            )
        return parts[i]

    def _structural_error(self, message: str) -> StructuralError:
        column = len(self.line) - len(self.line.lstrip()) + 1
        return make_structural_error(
            message, self.file, self.line_no, snippet=self.line, column=column
        )

    def _warn_unclosed(self) -> None:
        if self.in_code_block:
            logger.warning("%s: embedded code block not closed at end of file", self.file)
        if self.current is not None and not self.current.is_root:
            logger.warning(
                "%s: %s '%s' not closed at end of file",
                self.file,
                self.current.kind.value,
                self.current.name,
            )


def parse_pagemodel(text: str, name: str, file: Path | None = None) -> ModelTree:
    """
    Parse page model source into a ModelTree.

    Args:
        text: Page model source
        name: Root class name
        file: Source path used in error messages (default: ``<name>.pagemodel``)

    Returns:
        The parsed ModelTree
    """
    file = file if file is not None else Path(name + PAGEMODEL_EXTENSION)
    return PageModelParser(text, file, name).parse()


def read_pagemodel(path: Path, extension: str = PAGEMODEL_EXTENSION) -> ModelTree:
    """Read and parse a page model file."""
    text = path.read_text(encoding="utf-8")
    return PageModelParser(text, path, model_name_for(path, extension)).parse()
