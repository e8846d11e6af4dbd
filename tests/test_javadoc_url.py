"""Tests for Javadoc URL generation."""

from src.class_name import ClassName
from src.javadoc_url import default_javadoc_url, expand_url_pattern


def test_pattern_with_delimiter() -> None:
    """Verify that the full name's dots are replaced by the delimiter."""
    url = expand_url_pattern("{baseUrl}{full -}", "http://x/", "com.example.Foo")
    assert url == "http://x/com-example-Foo"


def test_pattern_without_delimiter() -> None:
    """Verify that the full name is inserted verbatim."""
    url = expand_url_pattern("{baseUrl}?q={full}", "http://x/", "com.example.Foo")
    assert url == "http://x/?q=com.example.Foo"


def test_pattern_unknown_field_removed() -> None:
    """Verify that unknown placeholders are replaced with nothing."""
    url = expand_url_pattern("http://h/{version}/{full /}.html", None, "a.b.C")
    assert url == "http://h//a/b/C.html"


def test_pattern_without_base_url() -> None:
    """Verify that a missing base URL expands to an empty string."""
    assert expand_url_pattern("{baseUrl}{full}", None, "a.B") == "a.B"


def test_pattern_literal_text_untouched() -> None:
    """Verify that text outside placeholders, including backslashes, is kept."""
    url = expand_url_pattern(r"x\1$0-{full _}", "b/", "a.B")
    assert url == r"x\1$0-a_B"


def test_default_url_inner_class() -> None:
    """Verify the standard javadoc layout for a nested class."""
    name = ClassName("java.util", ("Map",), "Entry")
    url = default_javadoc_url("http://docs/", name)
    assert url == "http://docs/java/util/Map.Entry.html"


def test_default_url_frames() -> None:
    """Verify the framed variant of the URL."""
    name = ClassName("java.lang", (), "String")
    assert (
        default_javadoc_url("http://docs/", name, frames=True)
        == "http://docs/index.html?java/lang/String.html"
    )


def test_default_url_default_package() -> None:
    """Verify that classes without a package sit directly under the base URL."""
    assert default_javadoc_url("http://docs/", ClassName(None, (), "Foo")) == (
        "http://docs/Foo.html"
    )


def test_pattern_empty_delimiter_removes_dots() -> None:
    """Verify that whitespace with no delimiter token joins the name's segments."""
    assert expand_url_pattern("{full }", None, "com.example.Foo") == "comexampleFoo"
