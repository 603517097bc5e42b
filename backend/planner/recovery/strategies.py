"""
Text-to-candidate recovery strategies.

Each strategy is a pure function ``str -> str`` that turns raw model output
into a candidate for the JSON parser. They are best-effort regex heuristics:
the later ones are more aggressive and can damage content that was already
valid, which is why the pipeline tries them strictly in ``STRATEGIES`` order
and only accepts a candidate that parses AND validates.
"""

import re
from typing import Callable, List, Tuple

Strategy = Callable[[str], str]


# ============================================================
# PRIMITIVE TRANSFORMS
# ============================================================

_FENCE_WITH_TAG = re.compile(r"`{3}json\s*", re.IGNORECASE)
_FENCE = re.compile(r"`{3}\s*")

_LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
_BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?\*/")
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_LOOSE_KEY = re.compile(r"(['\"])?([a-zA-Z0-9_]+)(['\"])?:")
_WHITESPACE = re.compile(r"\s+")

_ADJACENT_OBJECTS = re.compile(r"}\s*{")
_ADJACENT_ARRAYS = re.compile(r"]\s*\[")
_CONTROL_CHARS = re.compile(r"[\x00-\x1F\x7F]")


def strip_comments(text: str) -> str:
    text = _LINE_COMMENT.sub("", text)
    return _BLOCK_COMMENT.sub("", text)


def remove_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA.sub(r"\1", text)


def quote_keys(text: str) -> str:
    # NOTE: also matches "word:" inside string values (e.g. URLs)
    return _LOOSE_KEY.sub(r'"\2":', text)


def fix_common_errors(text: str) -> str:
    """Trailing commas, single quotes, comments, missing separators, control chars."""
    text = remove_trailing_commas(text)
    text = text.replace("'", '"')
    text = strip_comments(text)
    text = _ADJACENT_OBJECTS.sub("},{", text)
    text = _ADJACENT_ARRAYS.sub("],[", text)
    text = _CONTROL_CHARS.sub("", text)
    return text.strip()


def balance_closers(text: str) -> str:
    """Append the closing braces/brackets a truncated document is missing."""
    missing_braces = text.count("{") - text.count("}")
    if missing_braces > 0:
        text += "}" * missing_braces

    missing_brackets = text.count("[") - text.count("]")
    if missing_brackets > 0:
        text += "]" * missing_brackets

    return text


# ============================================================
# STRATEGIES (in preference order)
# ============================================================

def strip_code_fences(text: str) -> str:
    text = _FENCE_WITH_TAG.sub("", text)
    text = _FENCE.sub("", text)
    return text.strip()


def extract_json_boundary(text: str) -> str:
    first = text.find("{")
    last = text.rfind("}")

    if first == -1 or last == -1 or first >= last:
        return text

    return text[first:last + 1]


def aggressive_clean(text: str) -> str:
    text = strip_comments(text)
    text = remove_trailing_commas(text)
    text = quote_keys(text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def fix_errors_within_boundary(text: str) -> str:
    return fix_common_errors(extract_json_boundary(text))


def repair_structure(text: str) -> str:
    return balance_closers(fix_errors_within_boundary(text))


STRATEGIES: List[Tuple[str, Strategy]] = [
    ("code_fences", strip_code_fences),
    ("json_boundary", extract_json_boundary),
    ("aggressive_clean", aggressive_clean),
    ("common_errors", fix_errors_within_boundary),
    ("structural_repair", repair_structure),
]
