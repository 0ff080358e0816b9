from typing import Literal

LanguageTag = Literal["javascript", "typescript", "python", "html", "css", "unknown"]

_EXTENSION_LANGUAGE_MAP: dict[str, LanguageTag] = {
    "js": "javascript",
    "jsx": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "py": "python",
    "html": "html",
    "htm": "html",
    "css": "css",
    "scss": "css",
    "sass": "css",
}

_LANGUAGE_NAMES: dict[LanguageTag, str] = {
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "python": "Python",
    "html": "HTML",
    "css": "CSS",
    "unknown": "Unknown",
}

SUPPORTED_LANGUAGES: frozenset[str] = frozenset(_LANGUAGE_NAMES)


def classify(filename: str) -> LanguageTag:
    """Map a filename to a language tag by its extension, case-insensitively.

    A name without a dot is treated as its own extension, so ``Makefile`` and
    ``README`` both come back as ``unknown``.
    """
    if not isinstance(filename, str):
        raise TypeError(f"filename must be str, not {type(filename).__name__}")
    extension = filename.rsplit(".", 1)[-1].lower()
    return _EXTENSION_LANGUAGE_MAP.get(extension, "unknown")


def is_language_supported(filename: str) -> bool:
    return classify(filename) != "unknown"


def language_name(filename: str) -> str:
    return _LANGUAGE_NAMES[classify(filename)]
