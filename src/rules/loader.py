from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules


def _strip_markdown_fences(content: str) -> str:
    """
    Return the body of the first ```yaml fence, or the whole content
    when the file is plain YAML.
    """
    lines = content.splitlines()
    body: list[str] = []
    in_block = False

    for line in lines:
        stripped = line.strip()
        if not in_block and stripped.startswith("```yaml"):
            in_block = True
            continue
        if in_block:
            if stripped.startswith("```"):
                return "\n".join(body)
            body.append(line)

    if in_block:
        return "\n".join(body)
    return content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the render rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    content = _strip_markdown_fences(path.read_text(encoding="utf-8"))

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
