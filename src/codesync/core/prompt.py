from codesync.core.languages import classify
from codesync.core.python_context import extract_python_context, format_python_context

_FENCE = "```"


def build_file_context(filename: str, code: str) -> str:
    """Render one file for a prompt; Python files also get a structural summary."""
    if classify(filename) == "python":
        summary = format_python_context(extract_python_context(code))
        return f"\n# Python Context for {filename}\n{summary}\n\n# Code\n{_FENCE}python\n{code}\n{_FENCE}"
    return f"\n# {filename}\n{_FENCE}\n{code}\n{_FENCE}"


def build_ai_prompt(
    question: str,
    selection: str,
    selection_id: str,
    filename: str,
    code: str,
    project_map: str,
) -> str:
    sections = [
        f"# Question\n{question}",
        f"# Selected Code ({selection_id})\n{_FENCE}\n{selection}\n{_FENCE}",
        f"# Full File Context\n{build_file_context(filename, code)}",
        f"# Project Skeleton\n{_FENCE}\n{project_map}\n{_FENCE}",
    ]
    return "\n\n".join(sections).strip()
