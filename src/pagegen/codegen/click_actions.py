"""
Click action and tester signature synthesis for element testers.

Each element tester wraps a ``ClickAction``: how to find the element, which
page object the action belongs to and, for navigating elements, where a
click leads::

    ClickAction.make(this::getsaveButton, this)
    ClickAction.makeNav(this::getloginButton, this, HomePage.class)
    ClickAction.makeNav(() -> getuserLink(userId), this, testUserRow())
"""

from __future__ import annotations

from dataclasses import dataclass

from pagegen.core.ir import ElementSpec

from .roles import ResolvedTypes

TESTER_SIGIL = "@"


@dataclass(frozen=True)
class TesterSignature:
    """
    Java tester class used for an element.

    Attributes:
        type_name: Tester class name, sigils removed
        params: Generic arguments including brackets, or ""
    """

    type_name: str
    params: str = ""

    @property
    def declared_type(self) -> str:
        return self.type_name + self.params

    @property
    def constructor(self) -> str:
        """Class name for a ``new`` expression, using the diamond when generic."""
        return self.type_name + ("<>" if self.params else "")


def nav_type_for(elem: ElementSpec, types: ResolvedTypes) -> str:
    """Type the tester returns to after a click."""
    if elem.return_type is None:
        return types.same_page_type
    if elem.is_self_navigation:
        return types.nav_type
    return elem.return_target or elem.return_type


def nav_value_for(elem: ElementSpec, types: ResolvedTypes) -> str:
    """Value expression passed to ``makeNav`` as the navigation target."""
    if elem.is_self_navigation:
        return types.nav_value
    if elem.chained_method is not None:
        return f"test{elem.chained_method}()"
    return f"{elem.return_target}.class"


def tester_signature(elem: ElementSpec, types: ResolvedTypes) -> TesterSignature:
    """
    Resolve the tester class and its generic arguments.

    The number of ``@`` sigils on an explicit tester token picks the arity:
    ``@@@Tester`` and inferred testers take ``<page, nav>``, ``@@Tester``
    takes ``<page>`` and ``@Tester`` is not generic.
    """
    tester = elem.tester_type
    both = f"<{types.page_type}, {nav_type_for(elem, types)}>"
    if tester.startswith(TESTER_SIGIL * 3):
        return TesterSignature(tester[3:], both)
    if tester.startswith(TESTER_SIGIL * 2):
        return TesterSignature(tester[2:], f"<{types.page_type}>")
    if tester.startswith(TESTER_SIGIL):
        return TesterSignature(tester[1:])
    return TesterSignature(tester, both)


def element_accessor_ref(elem: ElementSpec) -> str:
    """Reference to the element's accessor, bound to its locator arguments."""
    if not elem.locator.args:
        return f"this::get{elem.name}"
    return f"() -> get{elem.name}({elem.locator.call_args})"


def click_action(elem: ElementSpec, types: ResolvedTypes, continue_indent: str) -> str:
    """
    Build the tester constructor arguments for an element.

    Args:
        elem: Element to build the action for
        types: Resolved names of the owning class
        continue_indent: Indent for a click modifier on its own line

    Returns:
        Java argument list for the tester constructor
    """
    ref = element_accessor_ref(elem)
    if elem.navigates:
        action = f"ClickAction.makeNav({ref}, {types.self_expr}, {nav_value_for(elem, types)})"
    else:
        action = f"ClickAction.make({ref}, {types.self_expr})"

    if elem.click_modifier:
        action += "\n" + continue_indent + elem.click_modifier

    if types.role.is_component:
        return f"getReturnObj(), {action}, getEvaluator()"
    return action
