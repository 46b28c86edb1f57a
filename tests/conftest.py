"""Shared pytest fixtures for PageGen tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from pagegen.core.ir import ModelTree
from pagegen.core.parser import parse_pagemodel

LOGIN_PAGE = """\
PageModel com.example.pages
import com.example.tools.UserTester

# login form
* usernameField id username
* passwordField id password
rememberMeCheckbox id remember
loginButton id login HomePage
userLink xpath "//a[@data-user='s%userId%']" UserProfilePage

@SectionModel Footer
    privacyLink ^linkText "Privacy" P
@EndSection

%onPageLoad
    System.out.println("loaded");
%end
"""


@pytest.fixture
def login_page_source() -> str:
    """Return a page model exercising most of the DSL."""
    return LOGIN_PAGE


@pytest.fixture
def login_page(login_page_source: str) -> ModelTree:
    """Return the parsed login page model."""
    return parse_pagemodel(login_page_source, "LoginPage")


@pytest.fixture
def write_pagemodel(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing a page model file below a source directory."""

    def _write(relative: str, content: str, src_dir: str = "pagemodels") -> Path:
        path = tmp_path / src_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
