"""Tests for locator placeholder extraction and tester type inference."""

import pytest

from pagegen.core.element_types import DEFAULT_TESTER, infer_tester_type
from pagegen.core.ir import LocatorArgKind, LocatorArgument
from pagegen.core.locators import extract_locator


class TestExtractLocator:
    """Tests for extract_locator."""

    def test_string_and_int_placeholders(self) -> None:
        """Placeholders become ordered arguments spliced into the template."""
        result = extract_locator("#item-s%id%-i%idx%")
        assert result.args == [
            LocatorArgument(name="id", kind=LocatorArgKind.STRING),
            LocatorArgument(name="idx", kind=LocatorArgKind.INT),
        ]
        assert result.template == '#item-" + id + "-" + idx + "'
        assert result.pattern == "#item-s%id%-i%idx%"

    def test_no_placeholders(self) -> None:
        """A plain locator is its own template."""
        result = extract_locator("page-title")
        assert result.args == []
        assert result.template == "page-title"

    def test_java_params_and_call_args(self) -> None:
        result = extract_locator("#item-s%id%-i%idx%")
        assert result.java_params == "String id, int idx"
        assert result.call_args == "id, idx"

    def test_duplicate_names_are_kept(self) -> None:
        """Duplicate placeholder names are not merged."""
        result = extract_locator("s%a%/s%a%")
        assert [arg.name for arg in result.args] == ["a", "a"]

    def test_placeholder_inside_quotes(self) -> None:
        result = extract_locator("//a[@data-user='s%userId%']")
        assert result.template == "//a[@data-user='\" + userId + \"']"

    @pytest.mark.parametrize("pattern", ["x%id%", "s%%", "100%"])
    def test_non_placeholders_are_ignored(self, pattern: str) -> None:
        result = extract_locator(pattern)
        assert result.args == []
        assert result.template == pattern


class TestInferTesterType:
    """Tests for suffix based tester inference."""

    @pytest.mark.parametrize(
        ("name", "tester"),
        [
            ("usernameField", DEFAULT_TESTER),
            ("rememberMeCheckbox", "CheckboxTester"),
            ("countryDropDown", "DropDownTester"),
            ("paymentIFrame", "IFrameTester"),
            ("title", DEFAULT_TESTER),
        ],
    )
    def test_suffixes(self, name: str, tester: str) -> None:
        assert infer_tester_type(name) == tester

    def test_first_match_wins(self) -> None:
        """MultiSelect names match the earlier Select entry."""
        assert infer_tester_type("tagsMultiSelect") == "SelectTester"
