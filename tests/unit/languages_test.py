"""Unit tests for extension-based language classification."""

import pytest

from codesync.core.languages import classify, is_language_supported, language_name


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("app.js", "javascript"),
        ("App.jsx", "javascript"),
        ("main.ts", "typescript"),
        ("View.TSX", "typescript"),
        ("script.py", "python"),
        ("index.html", "html"),
        ("page.HTM", "html"),
        ("site.css", "css"),
        ("theme.scss", "css"),
        ("theme.sass", "css"),
        ("archive.tar.gz", "unknown"),
        ("notes.txt", "unknown"),
        ("Makefile", "unknown"),
        ("", "unknown"),
        ("src/lib/util.py", "python"),
    ],
)
def test_classify(filename: str, expected: str) -> None:
    assert classify(filename) == expected


def test_classify_uses_last_extension() -> None:
    assert classify("component.test.tsx") == "typescript"
    assert classify("data.py.bak") == "unknown"


def test_classify_rejects_non_string() -> None:
    with pytest.raises(TypeError):
        classify(None)  # type: ignore[arg-type]


def test_is_language_supported() -> None:
    assert is_language_supported("a.py") is True
    assert is_language_supported("a.rs") is False


@pytest.mark.parametrize(
    ("filename", "expected"),
    [("a.ts", "TypeScript"), ("a.jsx", "JavaScript"), ("a.py", "Python"), ("a.htm", "HTML"), ("a.rb", "Unknown")],
)
def test_language_name(filename: str, expected: str) -> None:
    assert language_name(filename) == expected
