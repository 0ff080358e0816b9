import re

from codesync.models import PythonClass, PythonContext, PythonFunction

_CLASS = re.compile(r"class\s+(\w+)\s*(?:\((.*?)\))?:")
_FUNCTION = re.compile(r"(?:async\s+)?def\s+(\w+)\s*\((.*?)\)")
_CONSTANT = re.compile(r"^[A-Z_][A-Z0-9_]*\s*=")


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


def extract_python_context(code: str) -> PythonContext:
    """Summarize a Python module line by line: imports, classes, functions and constants.

    Line numbers are 1-based. A ``def`` indented under the most recent class is
    recorded as one of its methods; anything else is a top-level function.
    """
    if not isinstance(code, str):
        raise TypeError(f"code must be str, not {type(code).__name__}")
    context = PythonContext()
    current_class: PythonClass | None = None
    class_indent = -1

    for lineno, line in enumerate(code.split("\n"), start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        indent = _indent_of(line)

        if trimmed.startswith(("import ", "from ")):
            context.imports.append(trimmed)
            continue

        if trimmed.startswith("class "):
            match = _CLASS.match(trimmed)
            if match:
                current_class = PythonClass(name=match.group(1), lineno=lineno)
                context.classes.append(current_class)
                class_indent = indent
            continue

        if trimmed.startswith(("def ", "async def ")):
            match = _FUNCTION.match(trimmed)
            if match:
                if current_class is not None and indent > class_indent:
                    current_class.methods.append(match.group(1))
                else:
                    params = [p.strip() for p in match.group(2).split(",")]
                    context.functions.append(
                        PythonFunction(
                            name=match.group(1),
                            params=[p for p in params if p and p != "self"],
                            lineno=lineno,
                        )
                    )
                    current_class = None
            continue

        if current_class is not None and indent <= class_indent:
            current_class = None
        if current_class is None and _CONSTANT.match(trimmed):
            context.variables.append(trimmed.split("=", 1)[0].strip())

    return context


def format_python_context(context: PythonContext) -> str:
    sections: list[str] = []

    if context.imports:
        sections.append("**Imports:**\n" + "\n".join(f"- {imp}" for imp in context.imports))

    if context.classes:
        entries = []
        for cls in context.classes:
            methods = f"\n  Methods: {', '.join(cls.methods)}" if cls.methods else ""
            entries.append(f"- {cls.name} (line {cls.lineno}){methods}")
        sections.append("**Classes:**\n" + "\n".join(entries))

    if context.functions:
        entries = [f"- {func.name}({', '.join(func.params)}) (line {func.lineno})" for func in context.functions]
        sections.append("**Functions:**\n" + "\n".join(entries))

    if context.variables:
        sections.append("**Variables:**\n" + "\n".join(f"- {v}" for v in context.variables))

    return "\n\n".join(sections)
