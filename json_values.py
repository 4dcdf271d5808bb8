# json_values.py
# Value model and pretty-printer for parsed documents
#
# =============================================================================
#  VALUE MODEL
# =============================================================================
#
# Parsed values are native Python objects, converted once at parse time:
#
#     string  -> str        number -> int (signed 32-bit)
#     boolean -> bool       null   -> None
#     array   -> list       object -> dict (str keys)
#
# Every list and dict in a tree is created by the parser for that tree only,
# so a document owns its entries outright and no node is shared.
#
# =============================================================================
#  OUTPUT FORMAT
# =============================================================================
#
# The printer does not emit JSON. Keys are bare unless they contain a space,
# each entry sits on its own line, and nesting adds two spaces per level:
#
#     {
#       name: "viper",
#       "call sign": "one",
#       tags: ["a","b"],
#       inner: {
#         ok: true
#       }
#     }
#
# =============================================================================

from typing import Dict, List, Union

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
INDENT = "  "        # Added in front of every line of a document body

# ---------------------------------------------------------------------------
# TYPE ALIASES
# ---------------------------------------------------------------------------
Value = Union[str, int, bool, None, List["Value"], Dict[str, "Value"]]
Document = Dict[str, Value]

# ---------------------------------------------------------------------------
# SCALARS
# ---------------------------------------------------------------------------
def render_string(text: str) -> str:
    """
    Quote a string, re-applying the two escapes the parser resolves.
    """
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'

def render_key(key: str) -> str:
    if " " in key:
        return render_string(key)
    return key

# ---------------------------------------------------------------------------
# LAYOUT
# ---------------------------------------------------------------------------
def pad(text: str, prefix: str = INDENT) -> str:
    """
    Prefix every line of text and terminate each line with a newline.

    Lines break on "\n" only. Other line separators belong to string
    contents and are left alone.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return "".join(prefix + line + "\n" for line in lines)

def _render_array(items: List[Value]) -> str:
    return "[" + ",".join(render(item) for item in items) + "]"

def _render_document(doc: Document) -> str:
    if not doc:
        return "{}"
    last = len(doc) - 1
    body = []
    for idx, (key, value) in enumerate(doc.items()):
        sep = "," if idx < last else ""
        body.append(f"{render_key(key)}: {render(value)}{sep}\n")
    return "{\n" + pad("".join(body)) + "}"

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def render(value: Value) -> str:
    """
    Render a parsed value to text.

    Total over the value model. Anything the parser cannot produce (floats,
    tuples, non-string keys) is rejected with TypeError.
    """
    # bool is a subclass of int, so it has to be tested first.
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return render_string(value)
    if isinstance(value, list):
        return _render_array(value)
    if isinstance(value, dict):
        return _render_document(value)
    raise TypeError(f"cannot render value of type {type(value).__name__}")
