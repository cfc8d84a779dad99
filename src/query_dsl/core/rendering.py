"""JSON rendering of clause trees and its runtime options."""

from __future__ import annotations

import json
import os
from typing import Any

from pydantic import BaseModel, ConfigDict

from query_dsl.core.serializer import to_document

_INDENT_ENV = "QUERY_DSL_INDENT"
_SORT_KEYS_ENV = "QUERY_DSL_SORT_KEYS"
_DEFAULT_INDENT = 2
_FLAG_WORDS = {
    **dict.fromkeys(("1", "true", "yes", "on", "enabled"), True),
    **dict.fromkeys(("0", "false", "no", "off", "disabled"), False),
}


def env_flag(name: str, *, default_value: bool) -> bool:
    """Read an on/off switch such as `QUERY_DSL_SORT_KEYS`.

    Unknown words fall back to `default_value`.
    """
    word = os.environ.get(name, "").strip().lower()
    return _FLAG_WORDS.get(word, default_value)


def env_indent(name: str, *, default_value: int | None) -> int | None:
    """Read a JSON indentation width from environment variables.

    Args:
        name (str): Environment variable name.
        default_value (int | None): Fallback value when missing or invalid.

    Returns:
        int | None: Indentation width, `None` for compact output.

    """
    raw = os.getenv(name)
    if raw is None:
        return default_value
    normalized = raw.strip().lower()
    if normalized in {"none", "compact", ""}:
        return None
    try:
        value = int(normalized)
    except ValueError:
        return default_value
    return value if value >= 0 else default_value


class RenderOptions(BaseModel):
    """Represent JSON rendering options.

    Args:
        indent: Indentation width, `None` for single-line output.
        sort_keys: Whether object keys are sorted.
        ensure_ascii: Whether non-ASCII characters are escaped.

    """

    model_config = ConfigDict(frozen=True)

    indent: int | None = _DEFAULT_INDENT
    sort_keys: bool = False
    ensure_ascii: bool = False

    @classmethod
    def from_env(cls) -> RenderOptions:
        """Build options from `QUERY_DSL_*` environment variables.

        Returns:
            RenderOptions: Options with environment overrides applied.

        """
        return cls(
            indent=env_indent(_INDENT_ENV, default_value=_DEFAULT_INDENT),
            sort_keys=env_flag(_SORT_KEYS_ENV, default_value=False),
        )


def render_json(value: Any, options: RenderOptions | None = None) -> str:
    """Render a clause tree as JSON text.

    Args:
        value (Any): Clause, structured value or plain document.
        options (RenderOptions | None): Rendering options, defaults when omitted.

    Returns:
        str: JSON document.

    """
    render_options = options or RenderOptions()
    return json.dumps(
        to_document(value),
        indent=render_options.indent,
        sort_keys=render_options.sort_keys,
        ensure_ascii=render_options.ensure_ascii,
    )


def pretty_print(value: Any, options: RenderOptions | None = None) -> None:
    """Print a clause tree as indented JSON on stdout.

    Args:
        value (Any): Clause, structured value or plain document.
        options (RenderOptions | None): Rendering options, defaults when omitted.

    """
    print(render_json(value, options))  # noqa: T201
