"""Prompt templating helpers and the request builder."""
from __future__ import annotations
import re
from pathlib import Path

from seotools.common.errors import TemplateError
from seotools.common.schema import GenerationRequest

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
SYSTEM_TAG, USER_TAG = "<|system|>", "<|user|>"

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")

def load_template(name: str) -> str:
    """
    Load a prompt template.

    Args:
        name: Bundled template name (e.g. "writer") or a path to a template file.
    """
    path = Path(name)
    if path.suffix == "" and len(path.parts) == 1:
        path = TEMPLATE_DIR / f"{name}.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(f"Cannot read template {path}: {e}") from e

def render_prompt(template: str, **fields: object) -> str:
    """
    Render field values into the template.

    Args:
        template: Template content containing {{name}} placeholders.
        fields: Values by placeholder name. Missing names render empty.

    Returns:
        Rendered prompt.
    """
    def _sub(m: re.Match[str]) -> str:
        value = fields.get(m.group(1))
        return "" if value is None else str(value)

    return _PLACEHOLDER.sub(_sub, template)

def split_template(template: str) -> tuple[str, str]:
    """Split a template into its system and user sections.

    Without tags the whole template is the user section.
    """
    if SYSTEM_TAG in template and USER_TAG in template:
        start = template.index(SYSTEM_TAG) + len(SYSTEM_TAG)
        end = template.find(USER_TAG, start)
        if end == -1:
            raise TemplateError("<|user|> section must follow <|system|>")
        return template[start:end].strip(), template[end + len(USER_TAG):].strip()
    if SYSTEM_TAG in template or USER_TAG in template:
        raise TemplateError("Template must contain both <|system|> and <|user|> tags")
    return "", template.strip()

def build_request(template: str, **fields: object) -> GenerationRequest:
    system, user = split_template(template)
    return GenerationRequest(
        user_prompt=render_prompt(user, **fields),
        system_instruction=system,
    )
