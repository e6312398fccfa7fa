"""Abstract base class that both chat backends implement."""

from __future__ import annotations

from abc import ABC, abstractmethod

from componentgen.llm_adapter.models import ChatRequest


class ChatBackend(ABC):
    """
    Contract for chat backends.

    Every implementation MUST:
    - Make exactly one outbound call per ``complete`` invocation
    - Return the generated text untouched (no strip, no parsing)
    - Let client exceptions propagate; wrapping happens in the dispatcher
    """

    name: str

    @abstractmethod
    async def complete(self, request: ChatRequest) -> str:
        """Send the conversation and return the model's reply text."""
