"""Tests for icon title helpers."""

import pytest

from iconlint.svg.titles import (
    display_name,
    html_friendly_to_title,
    icon_name_from_title,
    slug_to_variable_name,
    title_to_html_friendly,
    title_to_slug,
)


@pytest.mark.parametrize("title, slug", [
    ("GitHub", "github"),
    ("C++", "cplusplus"),
    (".NET", "dotnet"),
    ("Dot & Co", "dotandco"),
    ("Café", "cafe"),
    ("Straße", "strasse"),
    ("Hello World!", "helloworld"),
])
def test_title_to_slug(title, slug):
    assert title_to_slug(title) == slug


def test_html_friendly_round_trip():
    title = 'Café "Dot" & <Co>'
    encoded = title_to_html_friendly(title)
    assert encoded == "Caf&#233; &quot;Dot&quot; &amp; &lt;Co&gt;"
    assert html_friendly_to_title(encoded) == title


def test_slug_to_variable_name():
    assert slug_to_variable_name("github") == "siGithub"
    assert slug_to_variable_name("dotnet") == "siDotnet"


def test_icon_name_from_title():
    assert icon_name_from_title("GitHub icon") == "GitHub"
    assert icon_name_from_title("Dot &amp; Co icon") == "Dot & Co"
    assert icon_name_from_title("GitHub") is None
    assert icon_name_from_title(" icon") is None
    assert icon_name_from_title("GitHub icon\n") is None


def test_display_name_tolerates_bad_titles():
    assert display_name("GitHub icon") == "GitHub"
    assert display_name("GitHub logo") == "GitHub logo"
