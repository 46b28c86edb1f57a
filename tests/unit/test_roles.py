"""Tests for role based type resolution."""

import pytest

from pagegen.codegen.roles import owner_page_type, resolve_types
from pagegen.core.ir import ModelKind, ModelTree, WriterRole
from pagegen.core.parser import parse_pagemodel


def _tree(root_kind: ModelKind, *chain: tuple[str, ModelKind]) -> ModelTree:
    """Build a tree whose nodes form a single chain below the root."""
    tree = ModelTree()
    node = tree.add_node("Root", root_kind, "Base", "com.x")
    for name, kind in chain:
        node = tree.add_node(name, kind, "Base", "com.x", parent=node)
    return tree


class TestWriterRole:
    """Tests for WriterRole.for_kind."""

    @pytest.mark.parametrize(
        ("kind", "is_root", "role"),
        [
            (ModelKind.PAGE, True, WriterRole.PAGE),
            (ModelKind.ABSTRACT_PAGE, True, WriterRole.ABSTRACT_PAGE),
            (ModelKind.COMPONENT, True, WriterRole.COMPONENT),
            (ModelKind.COMPONENT, False, WriterRole.INNER_COMPONENT),
            (ModelKind.SECTION, True, WriterRole.SECTION),
            (ModelKind.SECTION, False, WriterRole.INNER_SECTION),
        ],
    )
    def test_roles(self, kind: ModelKind, is_root: bool, role: WriterRole) -> None:
        assert WriterRole.for_kind(kind, is_root) == role


class TestOwnerPageType:
    """Tests for owner_page_type."""

    def test_root_page_owns_itself(self) -> None:
        tree = _tree(ModelKind.PAGE)
        assert owner_page_type(tree, tree.root) == "Root"

    @pytest.mark.parametrize(
        "kind", [ModelKind.ABSTRACT_PAGE, ModelKind.COMPONENT, ModelKind.SECTION]
    )
    def test_other_roots_use_page_variable(self, kind: ModelKind) -> None:
        tree = _tree(kind)
        assert owner_page_type(tree, tree.root) == "P"

    @pytest.mark.parametrize(
        ("root_kind", "expected"),
        [
            (ModelKind.PAGE, "Root"),
            (ModelKind.ABSTRACT_PAGE, "P"),
            (ModelKind.COMPONENT, "P"),
            (ModelKind.SECTION, "Root<P>"),
        ],
    )
    def test_direct_child(self, root_kind: ModelKind, expected: str) -> None:
        tree = _tree(root_kind, ("Child", ModelKind.COMPONENT))
        assert owner_page_type(tree, tree.nodes[1]) == expected

    def test_nested_section_parent_used_bare(self) -> None:
        tree = _tree(ModelKind.PAGE, ("Outer", ModelKind.SECTION), ("Inner", ModelKind.SECTION))
        assert owner_page_type(tree, tree.nodes[2]) == "Outer"

    def test_nested_components_defer_to_page(self) -> None:
        """A section three levels down still resolves to the root page."""
        tree = _tree(
            ModelKind.PAGE,
            ("Outer", ModelKind.COMPONENT),
            ("Inner", ModelKind.COMPONENT),
            ("Leaf", ModelKind.SECTION),
        )
        assert owner_page_type(tree, tree.nodes[1]) == "Root"
        assert owner_page_type(tree, tree.nodes[2]) == "Root"
        assert owner_page_type(tree, tree.nodes[3]) == "Root"

    def test_nested_components_under_abstract_page(self) -> None:
        tree = _tree(
            ModelKind.ABSTRACT_PAGE,
            ("Outer", ModelKind.COMPONENT),
            ("Inner", ModelKind.COMPONENT),
        )
        assert owner_page_type(tree, tree.nodes[2]) == "P"


class TestResolveTypes:
    """Tests for resolve_types across every role."""

    def test_page(self) -> None:
        tree = _tree(ModelKind.PAGE)
        types = resolve_types(tree, tree.root)
        assert types.role == WriterRole.PAGE
        assert (types.page_type, types.same_page_type, types.nav_type) == ("Root",) * 3
        assert (types.self_expr, types.nav_value) == ("this", "this")

    def test_abstract_page(self) -> None:
        tree = _tree(ModelKind.ABSTRACT_PAGE)
        types = resolve_types(tree, tree.root)
        assert (types.page_type, types.same_page_type, types.nav_type) == ("P", "P", "P")
        assert (types.self_expr, types.nav_value) == ("(P)this", "(P)this")

    def test_top_level_component(self) -> None:
        tree = _tree(ModelKind.COMPONENT)
        types = resolve_types(tree, tree.root)
        assert types.page_type == "R"
        assert (types.same_page_type, types.nav_type) == ("P", "P")
        assert (types.self_expr, types.nav_value) == ("(P)page", "(P)page")
        assert types.section_adapter == "Root_section"

    def test_inner_component(self) -> None:
        tree = _tree(ModelKind.PAGE, ("UserRow", ModelKind.COMPONENT))
        types = resolve_types(tree, tree.nodes[1])
        assert types.role == WriterRole.INNER_COMPONENT
        assert types.page_type == "R"
        assert (types.same_page_type, types.nav_type) == ("Root", "Root")
        assert types.self_expr == "(Root)page"

    def test_top_level_section(self) -> None:
        tree = _tree(ModelKind.SECTION)
        types = resolve_types(tree, tree.root)
        assert (types.page_type, types.same_page_type) == ("Root<P>", "Root<P>")
        assert types.nav_type == "P"
        assert (types.self_expr, types.nav_value) == ("this", "parentPage")

    def test_inner_section(self) -> None:
        tree = _tree(ModelKind.PAGE, ("Footer", ModelKind.SECTION))
        types = resolve_types(tree, tree.nodes[1])
        assert (types.page_type, types.same_page_type) == ("Footer", "Footer")
        assert types.nav_type == "Root"
        assert types.nav_value == "parentPage"

    def test_parsed_tree(self, login_page: ModelTree) -> None:
        footer = login_page.nodes[1]
        types = resolve_types(login_page, footer)
        assert types.owner_page_type == "LoginPage"
        assert types.role == WriterRole.INNER_SECTION


def test_deep_nesting_from_source() -> None:
    """Owner resolution walks through nested components in parsed files."""
    tree = parse_pagemodel(
        "PageModel com.x\n"
        "@ComponentModel Outer\n"
        "@ComponentModel Inner\n"
        "@SectionModel Leaf\n"
        "@EndSection\n"
        "@EndComponent\n"
        "@EndComponent\n",
        "HomePage",
    )
    leaf = tree.nodes[3]
    assert leaf.name == "Leaf"
    assert owner_page_type(tree, leaf) == "HomePage"
