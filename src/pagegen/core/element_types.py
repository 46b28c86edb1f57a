"""
Tester type inference from element names.

An element without an explicit ``@Tester`` token gets its tester class from
the suffix of its name: ``usernameField`` is a ``WebElementTester``,
``rememberMeCheckbox`` a ``CheckboxTester``. Suffixes are tried in table
order and the first match wins, so ``countryMultiSelect`` matches ``Select``
before ``MultiSelect``.
"""

DEFAULT_TESTER = "WebElementTester"

ELEMENT_SUFFIXES: tuple[tuple[str, str], ...] = (
    ("Field", DEFAULT_TESTER),
    ("Button", DEFAULT_TESTER),
    ("Link", DEFAULT_TESTER),
    ("Display", DEFAULT_TESTER),
    ("FileUpload", DEFAULT_TESTER),
    ("Checkbox", "CheckboxTester"),
    ("DropDown", "DropDownTester"),
    ("Select", "SelectTester"),
    ("MultiSelect", "MultiSelectTester"),
    ("Radio", DEFAULT_TESTER),
    ("Image", DEFAULT_TESTER),
    ("Tab", DEFAULT_TESTER),
    ("Control", DEFAULT_TESTER),
    ("IFrame", "IFrameTester"),
    ("Row", DEFAULT_TESTER),
    ("Dialog", DEFAULT_TESTER),
    ("Modal", DEFAULT_TESTER),
    ("Nav", DEFAULT_TESTER),
    ("Menu", DEFAULT_TESTER),
    ("Section", DEFAULT_TESTER),
    ("Component", DEFAULT_TESTER),
)


def infer_tester_type(element_name: str) -> str:
    """Return the tester class for an element name."""
    for suffix, tester in ELEMENT_SUFFIXES:
        if element_name.endswith(suffix):
            return tester
    return DEFAULT_TESTER
