"""Pattern-based source skeletons.

A skeleton keeps the structural lines of a file (imports, declarations,
signatures, closing braces) and drops comments and function bodies. It is a
lexical heuristic, not a parser: a body that does not fit one of the shapes
below is left uncollapsed and then thinned by the line filter.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from codesync.core.languages import LanguageTag, classify

JS_PLACEHOLDER = "{ /* ... */ }"
PY_PLACEHOLDER = "pass"


@dataclass(frozen=True)
class SkeletonRuleset:
    name: str
    strip_comments: Callable[[str], str]
    collapse_bodies: Callable[[str], str]
    keep_line: Callable[[str], bool]


# ---------------------------------------------------------------------------
# JavaScript / TypeScript
# ---------------------------------------------------------------------------

# The placeholder itself is a block comment and must survive a second pass.
_JS_BLOCK_COMMENT = re.compile(r"/\*(?! \.\.\. \*/)[\s\S]*?\*/")
_JS_LINE_COMMENT = re.compile(r"//.*")

# A body runs from the opening brace to the first line holding only a closing
# brace at the declaration's indent; every line in between is blank or
# indented deeper.
_JS_BODY = (
    r"\{(?! /\* \.\.\. \*/ \})[^\n]*"
    r"(?:\n(?:(?P=indent)[ \t]+\S[^\n]*|[ \t]*(?=\n)))*?"
    r"\n(?P=indent)\}"
)

_JS_FUNCTION = re.compile(
    r"^(?P<indent>[ \t]*)"
    r"(?P<head>(?:export\s+)?(?:default\s+)?(?:async\s+)?function\b\s*\*?\s*[\w$]*\s*"
    r"(?:<[^>]*>)?\s*\([^)]*\)(?:\s*:\s*[^{\n]+)?\s*)" + _JS_BODY,
    re.MULTILINE,
)

_JS_ARROW = re.compile(
    r"^(?P<indent>[ \t]*)"
    r"(?P<head>(?:export\s+)?(?:const|let|var)\s+[\w$]+\s*(?::\s*[^=\n]+)?\s*=\s*(?:async\s*)?"
    r"(?:\([^)]*\)|[\w$]+)(?:\s*:\s*[^=>{\n]+)?\s*=>\s*)" + _JS_BODY,
    re.MULTILINE,
)

_JS_CONSTRUCTOR = re.compile(
    r"^(?P<indent>[ \t]+)"
    r"(?P<head>(?:(?:public|private|protected)\s+)?constructor\s*\([^)]*\)\s*)" + _JS_BODY,
    re.MULTILINE,
)

_JS_METHOD = re.compile(
    r"^(?P<indent>[ \t]+)"
    r"(?P<head>(?:(?:public|private|protected|static|async|readonly|override|abstract|get|set)\s+)*\*?"
    r"(?!(?:if|for|while|switch|catch|with|return|function|constructor)\b)"
    r"[\w$]+\s*(?:<[^>]*>)?\s*\([^)]*\)(?:\s*:\s*[^{\n]+)?\s*)" + _JS_BODY,
    re.MULTILINE,
)

_JS_COLLAPSE_ORDER = (_JS_FUNCTION, _JS_ARROW, _JS_CONSTRUCTOR, _JS_METHOD)

_JS_KEYWORD_PREFIXES = (
    "import ",
    "export ",
    "type ",
    "interface ",
    "enum ",
    "declare ",
    "class ",
    "abstract class ",
    "function ",
    "async function ",
)
_JS_BINDING = re.compile(r"^(?:const|let|var)\s+[\w$]+")
_JS_MEMBER_SIGNATURE = re.compile(
    r"^\s+(?:(?:public|private|protected|static|async)\s+)?"
    r"(?!(?:if|for|while|switch|catch|with|return|await|throw|new|typeof|void|delete|yield|super)\b)"
    r"[\w$]+\s*\("
)


def _strip_js_comments(code: str) -> str:
    code = _JS_BLOCK_COMMENT.sub("", code)
    return _JS_LINE_COMMENT.sub("", code)


def _collapse_js_bodies(code: str) -> str:
    for pattern in _JS_COLLAPSE_ORDER:
        code = pattern.sub(lambda m: f"{m.group('indent')}{m.group('head')}{JS_PLACEHOLDER}", code)
    return code


def _keep_js_line(line: str) -> bool:
    trimmed = line.strip()
    if not trimmed:
        return False
    if trimmed.startswith(_JS_KEYWORD_PREFIXES):
        return True
    if _JS_BINDING.match(trimmed):
        return True
    if trimmed in ("}", "};"):
        return True
    return _JS_MEMBER_SIGNATURE.match(line) is not None


# ---------------------------------------------------------------------------
# Python
# ---------------------------------------------------------------------------

_PY_DOUBLE_DOCSTRING = re.compile(r'"""[\s\S]*?"""')
_PY_SINGLE_DOCSTRING = re.compile(r"'''[\s\S]*?'''")
_PY_LINE_COMMENT = re.compile(r"#.*")

_PY_BLOCK_HEADER = re.compile(r"^[ \t]*(?:async[ \t]+)?(?P<keyword>def|class)[ \t]+\w+")
_PY_NESTED_DECLARATION = re.compile(r"^[ \t]*(?:@|(?:async[ \t]+)?def[ \t]|class[ \t])")
_PY_CONSTANT = re.compile(r"^[A-Z_][A-Z0-9_]*\s*=")
_PY_KEYWORD_PREFIXES = ("import ", "from ", "class ", "def ", "async def ", "@")

_OPENERS = "([{"
_CLOSERS = ")]}"


def _strip_python_comments(code: str) -> str:
    code = _PY_DOUBLE_DOCSTRING.sub('""""""', code)
    code = _PY_SINGLE_DOCSTRING.sub("''''''", code)
    return _PY_LINE_COMMENT.sub("", code)


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def _header_end(lines: list[str], start: int) -> int | None:
    """Return the index of the line closing a ``def``/``class`` signature.

    Signatures may span lines while brackets are open; the header ends on the
    first line with balanced brackets whose last character is a colon.
    """
    depth = 0
    for index in range(start, len(lines)):
        line = lines[index]
        depth += sum(line.count(c) for c in _OPENERS) - sum(line.count(c) for c in _CLOSERS)
        if depth <= 0:
            return index if line.rstrip().endswith(":") else None
    return None


def _collapse_python_bodies(code: str) -> str:
    lines = code.split("\n")
    result: list[str] = []
    index = 0
    while index < len(lines):
        line = lines[index]
        header = _PY_BLOCK_HEADER.match(line)
        end = _header_end(lines, index) if header else None
        if header is None or end is None:
            result.append(line)
            index += 1
            continue

        indent = _indent_width(line)
        body_end = end + 1
        while body_end < len(lines) and (not lines[body_end].strip() or _indent_width(lines[body_end]) > indent):
            body_end += 1
        body = lines[end + 1 : body_end]

        result.extend(lines[index : end + 1])
        # Classes holding methods or nested classes are descended into so
        # their members stay visible; everything else collapses.
        if header.group("keyword") == "class" and any(_PY_NESTED_DECLARATION.match(b) for b in body):
            index = end + 1
            continue
        if any(b.strip() for b in body):
            result.append(" " * (indent + 4) + PY_PLACEHOLDER)
        index = body_end
    return "\n".join(result)


def _keep_python_line(line: str) -> bool:
    trimmed = line.strip()
    if not trimmed:
        return False
    if trimmed.startswith(_PY_KEYWORD_PREFIXES):
        return True
    return _PY_CONSTANT.match(trimmed) is not None


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

JS_RULESET = SkeletonRuleset(
    name="javascript",
    strip_comments=_strip_js_comments,
    collapse_bodies=_collapse_js_bodies,
    keep_line=_keep_js_line,
)

PYTHON_RULESET = SkeletonRuleset(
    name="python",
    strip_comments=_strip_python_comments,
    collapse_bodies=_collapse_python_bodies,
    keep_line=_keep_python_line,
)

# html, css and unknown fall back to the JS/TS rules.
_RULESETS: dict[str, SkeletonRuleset] = {"python": PYTHON_RULESET}


def ruleset_for(language: LanguageTag | str) -> SkeletonRuleset:
    return _RULESETS.get(language, JS_RULESET)


def _extract_once(code: str, ruleset: SkeletonRuleset) -> str:
    text = ruleset.strip_comments(code)
    text = ruleset.collapse_bodies(text)
    return "\n".join(line for line in text.split("\n") if ruleset.keep_line(line))


def extract_skeleton(code: str, ruleset: SkeletonRuleset) -> str:
    """Reduce ``code`` to its structural lines.

    Filtering can drop the lines that kept a body from collapsing (an
    unindented template literal line, say), so passes repeat until the output
    is stable. Every pass that changes the text removes lines or characters.
    """
    if not isinstance(code, str):
        raise TypeError(f"code must be str, not {type(code).__name__}")
    skeleton = _extract_once(code, ruleset)
    while True:
        again = _extract_once(skeleton, ruleset)
        if again == skeleton:
            return skeleton
        skeleton = again


def generate_skeleton(code: str, filename: str = "") -> str:
    language = classify(filename) if filename else "javascript"
    return extract_skeleton(code, ruleset_for(language))
