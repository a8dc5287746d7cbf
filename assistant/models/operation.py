"""In-memory descriptors passed between the builder, invoker and interpreter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .common import ImageData, OperationKind


@dataclass(frozen=True)
class OperationRequest:
    """One model invocation, fully shaped and ready to send."""

    operation_kind: OperationKind
    model_id: str
    prompt_text: str
    attached_parts: tuple[ImageData, ...] = field(default_factory=tuple)

    # Google Search grounding (quiz only)
    tools_enabled: bool = False

    # Thinking budget (chat on the top tier only)
    extended_reasoning_budget: Optional[int] = None


@dataclass(frozen=True)
class ValidationFailure:
    """Input rejected before any remote call. Shown inline, never raised."""

    message: str
