"""
Translation token lookup and interpolation.

Provides dot-notation lookup into nested translation documents with a typed
result, so callers can tell an exact translation from a missing key without
inspecting the rendered string.

Example:
    from common.i18n import resolve, interpolate

    result = resolve(document, "api.errors.notFound")
    if result.found:
        message = interpolate(result.value, {"name": "Ada"})
    else:
        message = result.render()   # "[api.errors.notFound]"
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^{}]+)\}\}")


@dataclass(frozen=True)
class Found:
    """A token that resolved to a translated string."""
    path: str
    value: str

    found = True

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class Missing:
    """A token that could not be resolved."""
    path: str

    found = False

    def render(self) -> str:
        return placeholder(self.path)


TokenResult = Union[Found, Missing]


def placeholder(path: str) -> str:
    """Visible marker used in place of a missing translation."""
    return f"[{path}]"


def get_nested(data: Any, path: str) -> Optional[Any]:
    """
    Traverse nested mappings (and lists, by integer segment) using a dotted path.

    Args:
        data: Document to traverse
        path: Dot notation path (e.g., 'email.subjects.welcome')

    Returns:
        Value at path, or None if any segment is absent
    """
    current = data
    for part in path.split("."):
        if isinstance(current, Mapping):
            if part not in current:
                return None
            current = current[part]
        elif isinstance(current, list) and part.isdigit():
            index = int(part)
            if index >= len(current):
                return None
            current = current[index]
        else:
            return None
    return current


def resolve(document: Mapping[str, Any], path: str) -> TokenResult:
    """
    Resolve a dotted path to a translated string.

    Empty or absent values are Missing. Non-string leaves are rendered
    with str().
    """
    value = get_nested(document, path)
    if not value:
        return Missing(path)
    if isinstance(value, (Mapping, list)):
        return Missing(path)
    return Found(path, value if isinstance(value, str) else str(value))


def interpolate(text: str, variables: Optional[Dict[str, Any]] = None) -> str:
    """
    Replace {{varName}} placeholders with values.

    Each placeholder is replaced once, in a single pass, so values that
    themselves contain {{...}} are not expanded again. Placeholders without
    a supplied value are left untouched.
    """
    if not variables:
        return text

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in variables and variables[name] is not None:
            return str(variables[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, text)


def find_unresolved(text: str) -> List[str]:
    """Return every {{...}} placeholder still present in text."""
    return [match.group(0) for match in PLACEHOLDER_PATTERN.finditer(text)]
