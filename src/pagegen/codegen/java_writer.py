"""
Java source generation for page model trees.

Renders a ``ModelTree`` into one Java compilation unit. The root node becomes
the top-level class; nested components and sections become inner classes,
one indent level deeper. Each class is written in a fixed order:

1. class header and constructors (role specific)
2. ``testModelDisplayed()``, if any element is marked displayed
3. protected element accessors
4. public element testers
5. nested classes
6. embedded Java blocks
7. closing brace
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from pagegen.core.ir import INDENT, ElementSpec, ModelNode, ModelTree, WriterRole

from .click_actions import click_action, tester_signature
from .roles import PAGE_VAR, ResolvedTypes, resolve_types

RUNTIME_IMPORTS: tuple[str, ...] = (
    "import org.pagemodel.web.*;",
    "import org.pagemodel.web.testers.*;",
    "import org.pagemodel.core.testers.*;",
    "import org.pagemodel.tools.*;",
    "import java.util.function.Consumer;",
    "import org.openqa.selenium.By;",
    "import org.openqa.selenium.WebElement;",
)

MODEL_BASE = "ExtendedModelBase"
PAGE_BOUND = f"{PAGE_VAR} extends {MODEL_BASE}<? super {PAGE_VAR}>"

ACCESSORS_BEGIN = "// ================ begin protected web elements =============="
ACCESSORS_END = "// ================ end protected web elements ================"
TESTERS_BEGIN = "// ================ begin public testers ======================"
TESTERS_END = "// ================ end public testers ========================"


class JavaWriter:
    """
    Renders page model trees to Java source.

    The writer holds no per-file state; one instance can render any number
    of trees.
    """

    def __init__(self, extra_imports: Sequence[str] = ()):
        """
        Initialize writer.

        Args:
            extra_imports: Import statements added to every generated file
        """
        self.extra_imports = list(extra_imports)
        self._headers: dict[WriterRole, Callable[[ModelNode, ResolvedTypes, str], list[str]]] = {
            WriterRole.PAGE: self._page_header,
            WriterRole.ABSTRACT_PAGE: self._abstract_page_header,
            WriterRole.COMPONENT: self._component_header,
            WriterRole.INNER_COMPONENT: self._component_header,
            WriterRole.SECTION: self._section_header,
            WriterRole.INNER_SECTION: self._section_header,
        }

    def generate(self, tree: ModelTree) -> str:
        """
        Generate the Java file for a tree.

        Returns:
            Complete Java source, newline terminated
        """
        lines = self._file_header(tree)
        lines.append("")
        lines.extend(self._class(tree, tree.root, ""))
        return "\n".join(lines) + "\n"

    # -------------------------------------------------------------------------
    # File and class structure
    # -------------------------------------------------------------------------

    def _file_header(self, tree: ModelTree) -> list[str]:
        lines = [f"package {tree.root.package};", ""]
        lines.extend(RUNTIME_IMPORTS)
        lines.extend(self.extra_imports)
        for node in tree.walk():
            lines.extend(node.imports)
        return lines

    def _class(self, tree: ModelTree, node: ModelNode, indent: str) -> list[str]:
        types = resolve_types(tree, node)
        lines = self._headers[types.role](node, types, indent)
        lines.extend(self._model_displayed(node, types, indent))
        lines.extend(self._accessors(node, indent))
        lines.extend(self._testers(node, types, indent))
        for child in tree.children_of(node):
            lines.append("")
            lines.extend(self._class(tree, child, indent + INDENT))
        lines.extend(self._code_blocks(node, indent))
        lines.append(f"{indent}}}")
        return lines

    def _code_blocks(self, node: ModelNode, indent: str) -> list[str]:
        lines: list[str] = []
        for block in node.code_blocks:
            lines.append("")
            lines.extend(indent + line if line else "" for line in block.lines)
        return lines

    # -------------------------------------------------------------------------
    # Class headers
    # -------------------------------------------------------------------------

    def _page_header(self, node: ModelNode, types: ResolvedTypes, indent: str) -> list[str]:
        return [
            f"{indent}public class {node.name} extends {node.superclass}<{node.name}> {{",
            *self._page_constructor(node, indent + INDENT),
        ]

    def _abstract_page_header(
        self, node: ModelNode, types: ResolvedTypes, indent: str
    ) -> list[str]:
        return [
            f"{indent}public abstract class {node.name}<{PAGE_VAR} extends {node.name}"
            f"<? super {PAGE_VAR}>> extends {node.superclass}<{PAGE_VAR}> {{",
            *self._page_constructor(node, indent + INDENT),
        ]

    def _page_constructor(self, node: ModelNode, class_indent: str) -> list[str]:
        return [
            f"{class_indent}public {node.name}(ExtendedTestContext testContext) {{",
            f"{class_indent}{INDENT}super(testContext);",
            f"{class_indent}}}",
        ]

    def _component_header(self, node: ModelNode, types: ResolvedTypes, indent: str) -> list[str]:
        name = node.name
        owner = types.owner_page_type
        adapter = types.section_adapter
        class_indent = indent + INDENT
        method_indent = class_indent + INDENT
        inner_indent = method_indent + INDENT
        click_param = f"ClickAction<?, {owner}> clickAction"

        if types.role == WriterRole.COMPONENT:
            declaration = (
                f"public class {name}<R, {PAGE_BOUND}> extends "
                f"{node.superclass}<R, {owner}, {name}<R, {owner}>> {{"
            )
            adapter_params = f"{adapter}, {owner}"
        else:
            declaration = (
                f"public class {name}<R> extends {node.superclass}<R, {owner}, {name}<R>> {{"
            )
            adapter_params = adapter

        return [
            f"{indent}{declaration}",
            f"{class_indent}public {name}({click_param}, TestEvaluator testEvaluator) {{",
            f"{method_indent}super(clickAction, testEvaluator);",
            f"{class_indent}}}",
            "",
            f"{class_indent}public {name}(R returnObj, {click_param}, TestEvaluator testEvaluator) {{",
            f"{method_indent}super(returnObj, clickAction, testEvaluator);",
            f"{class_indent}}}",
            "",
            f"{class_indent}public class {adapter} extends {name}<{adapter_params}> {{",
            f"{method_indent}public {adapter}({click_param}, TestEvaluator testEvaluator) {{",
            f"{inner_indent}super(clickAction, testEvaluator);",
            f"{inner_indent}setReturnObj(this);",
            f"{method_indent}}}",
            "",
            f"{method_indent}public {owner} testSectionParent() {{",
            f"{inner_indent}return {types.self_expr};",
            f"{method_indent}}}",
            f"{class_indent}}}",
            "",
            f"{class_indent}public {adapter} asSection() {{",
            f"{method_indent}return new {adapter}(clickAction, getEvaluator());",
            f"{class_indent}}}",
        ]

    def _section_header(self, node: ModelNode, types: ResolvedTypes, indent: str) -> list[str]:
        name = node.name
        owner = types.owner_page_type
        self_type = types.page_type
        class_indent = indent + INDENT
        if types.role == WriterRole.SECTION:
            declaration = f"public class {name}<{PAGE_BOUND}>"
        else:
            declaration = f"public class {name}"
        return [
            f"{indent}{declaration} extends {node.superclass}<{self_type}, {owner}, {self_type}> {{",
            f"{class_indent}public {name}(ClickAction<{owner}, {owner}> clickAction, "
            f"TestEvaluator testEvaluator) {{",
            f"{class_indent}{INDENT}super(clickAction, testEvaluator);",
            f"{class_indent}}}",
        ]

    # -------------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------------

    def _model_displayed(self, node: ModelNode, types: ResolvedTypes, indent: str) -> list[str]:
        if not node.has_displayed_elements:
            return []
        displayed = [elem for elem in node.elements if elem.displayed]

        class_indent = indent + INDENT
        method_indent = class_indent + INDENT
        continue_indent = method_indent + INDENT * 2
        if types.role.is_component:
            consumer_type = types.section_adapter
            start, end = "return page -> page", ";"
        else:
            consumer_type = types.page_type
            start, end = "return super.testModelDisplayed().andThen(page -> page", ");"

        lines = [
            "",
            f"{class_indent}@Override",
            f"{class_indent}protected Consumer<{consumer_type}> testModelDisplayed() {{",
            f"{method_indent}{start}",
        ]
        lines.extend(f"{continue_indent}.test{elem.name}(){elem.display_test}" for elem in displayed)
        lines[-1] += end
        lines.append(f"{class_indent}}}")
        return lines

    def _accessors(self, node: ModelNode, indent: str) -> list[str]:
        methods = [self._accessor(elem, indent + INDENT) for elem in node.elements]
        return _member_section(methods, indent + INDENT, ACCESSORS_BEGIN, ACCESSORS_END)

    def _accessor(self, elem: ElementSpec, class_indent: str) -> list[str]:
        locator = elem.locator
        return [
            f"{class_indent}protected WebElement get{elem.name}({locator.java_params}) {{",
            f'{class_indent}{INDENT}return {elem.find_method}(By.{elem.by_type}("{locator.template}"));',
            f"{class_indent}}}",
        ]

    def _testers(self, node: ModelNode, types: ResolvedTypes, indent: str) -> list[str]:
        methods = [self._tester(elem, types, indent + INDENT) for elem in node.elements]
        return _member_section(methods, indent + INDENT, TESTERS_BEGIN, TESTERS_END)

    def _tester(self, elem: ElementSpec, types: ResolvedTypes, class_indent: str) -> list[str]:
        method_indent = class_indent + INDENT
        signature = tester_signature(elem, types)
        action = click_action(elem, types, method_indent + INDENT * 2)
        return [
            f"{class_indent}public {signature.declared_type} test{elem.name}"
            f"({elem.locator.java_params}) {{",
            f"{method_indent}return new {signature.constructor}({action});",
            f"{class_indent}}}",
        ]


def _member_section(
    methods: list[list[str]], class_indent: str, begin: str, end: str
) -> list[str]:
    """Lay out methods between banner comments, separated by blank lines."""
    if not methods:
        return []
    lines = ["", class_indent + begin]
    for i, method in enumerate(methods):
        if i:
            lines.append("")
        lines.extend(method)
    lines.append(class_indent + end)
    return lines


def generate_java(tree: ModelTree, extra_imports: Sequence[str] = ()) -> str:
    """
    Convenience function to render a tree to Java.

    Args:
        tree: Parsed page model
        extra_imports: Import statements added after the runtime imports

    Returns:
        Java source
    """
    return JavaWriter(extra_imports).generate(tree)
