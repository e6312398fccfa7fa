"""
Prompt assembly: the fixed system preamble and template flattening.

A prompt is written as literal fragments with values interpolated between
them, the way a template literal reads::

    flatten_prompt(["Create a ", " button labelled ", ""], "red", "OK")
    # -> "Create a red button labelled OK"

There is always exactly one more fragment than there are values.
"""

from __future__ import annotations

from typing import Any, Sequence

from componentgen.llm_adapter.models import ChatMessage

SYSTEM_PREAMBLE = (
    "You are a frontend developer with 8 years of experience in React. "
    "You MUST only output the code in plain text without any formatting "
    "(this includes indentation and other formatting). "
    'You no longer need to include import React from "react"; at the beginning '
    "because bundlers can detect it automatically. "
    "Additionally, you do not need to export the code, as it will be used "
    "within the same file. The first prompt I will give you is the following:"
)


def flatten_prompt(fragments: str | Sequence[str], *values: Any) -> str:
    """Interleave ``str(value)`` between adjacent fragments.

    A bare string is a single fragment and therefore takes no values.
    """
    if isinstance(fragments, str):
        fragments = (fragments,)

    if len(fragments) != len(values) + 1:
        raise ValueError(
            f"Expected {len(values) + 1} fragments for {len(values)} values, "
            f"got {len(fragments)}"
        )

    parts: list[str] = []
    for index, fragment in enumerate(fragments):
        parts.append(fragment)
        if index < len(values):
            parts.append(str(values[index]))
    return "".join(parts)


def build_messages(user_prompt: str) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=SYSTEM_PREAMBLE),
        ChatMessage(role="user", content=user_prompt),
    ]
