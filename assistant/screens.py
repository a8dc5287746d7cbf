"""Per-screen state for the four assistant workflows.

Each screen is an independent state machine:

    idle -> loading -> success | error

A submission validates input (failure: error set, no remote call), flips
is_loading, clears the previous error and result, runs
build_request -> invoker -> interpret, then records the result or error.
is_loading is always false once the submission that set it returns.

A submit that arrives while the screen is loading leaves the screen
untouched; submit() returns BUSY_MESSAGE to the caller instead.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from .errors import RemoteInvocationError
from .interpreter import QUIZ_PARSE_MESSAGE, interpret, render_quiz, render_video_html
from .invoker import ApiInvoker
from .models import (
    ChatMessage,
    ImageData,
    ModelTier,
    OperationKind,
    OperationRequest,
    ScreenStatus,
    Sender,
    ValidationFailure,
)
from .request_builder import build_request

BUSY_MESSAGE = "A request is already in progress."


@dataclass
class Screen:
    """State shared by every screen: input, loading flag, error, result."""

    KIND: ClassVar[OperationKind]

    input_value: str = ""
    is_loading: bool = False
    error_message: Optional[str] = None
    result: Any = None
    model_id: Optional[str] = None

    @property
    def status(self) -> ScreenStatus:
        if self.is_loading:
            return ScreenStatus.LOADING
        if self.error_message:
            return ScreenStatus.ERROR
        if self.result is not None:
            return ScreenStatus.SUCCESS
        return ScreenStatus.IDLE

    def snapshot(self) -> dict:
        """Fields common to every screen response."""
        return {
            "operation": self.KIND,
            "input_value": self.input_value,
            "is_loading": self.is_loading,
            "error_message": self.error_message,
            "status": self.status,
            "model": self.model_id,
        }

    async def _run(self, input_value: str, inputs: dict, invoker: ApiInvoker) -> Optional[str]:
        """
        Run one submission through the pipeline.

        Returns:
            BUSY_MESSAGE if a call is already in flight (state unchanged),
            otherwise None
        """
        if self.is_loading:
            return BUSY_MESSAGE

        self.input_value = input_value

        outcome = build_request(self.KIND, **inputs)
        if isinstance(outcome, ValidationFailure):
            self.error_message = outcome.message
            return None

        self.model_id = outcome.model_id
        self.is_loading = True
        self.error_message = None
        self.result = None
        self._before_call(outcome)

        try:
            text = await invoker.invoke(outcome)
        except RemoteInvocationError as e:
            self.error_message = str(e)
        else:
            self._accept(interpret(self.KIND, text))
        finally:
            self.is_loading = False
        return None

    def _before_call(self, request: OperationRequest) -> None:
        pass

    def _accept(self, result: Any) -> None:
        self.result = result


@dataclass
class QuizScreen(Screen):
    """Paste questions, get grounded answers."""

    KIND: ClassVar[OperationKind] = OperationKind.QUIZ

    async def submit(self, quiz_text: str, invoker: ApiInvoker) -> Optional[str]:
        return await self._run(quiz_text, {"quiz_text": quiz_text}, invoker)

    def _accept(self, result: Any) -> None:
        if result is None:
            self.error_message = QUIZ_PARSE_MESSAGE
        else:
            self.result = result

    def rendered(self) -> list:
        return render_quiz(self.result) if self.result is not None else []


@dataclass
class ChatScreen(Screen):
    """Append-only conversation with a selectable model tier."""

    KIND: ClassVar[OperationKind] = OperationKind.CHAT

    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    messages: list[ChatMessage] = field(default_factory=list)
    tier: ModelTier = ModelTier.MID
    thinking_mode: bool = False

    async def submit(
        self,
        message: str,
        invoker: ApiInvoker,
        tier: Optional[ModelTier] = None,
        thinking_mode: Optional[bool] = None,
    ) -> Optional[str]:
        if self.is_loading:
            return BUSY_MESSAGE

        if tier is not None:
            self.tier = ModelTier(tier)
        if thinking_mode is not None:
            self.thinking_mode = thinking_mode

        inputs = {"message": message, "tier": self.tier, "thinking_mode": self.thinking_mode}
        return await self._run(message, inputs, invoker)

    def _before_call(self, request: OperationRequest) -> None:
        # The user's message stays in the transcript even if the call fails
        self.messages.append(ChatMessage(sender=Sender.USER, text=request.prompt_text))
        self.input_value = ""

    def _accept(self, result: Any) -> None:
        self.messages.append(ChatMessage(sender=Sender.AI, text=result))
        self.result = result


@dataclass
class ImageScreen(Screen):
    """One uploaded image plus a question about it."""

    KIND: ClassVar[OperationKind] = OperationKind.IMAGE

    image: Optional[ImageData] = None

    async def submit(self, image: Optional[ImageData], prompt: str, invoker: ApiInvoker) -> Optional[str]:
        if self.is_loading:
            return BUSY_MESSAGE

        self.image = image
        return await self._run(prompt, {"image": image, "prompt": prompt}, invoker)


@dataclass
class VideoScreen(Screen):
    """Analysis of a video from its title or description."""

    KIND: ClassVar[OperationKind] = OperationKind.VIDEO

    async def submit(self, description: str, invoker: ApiInvoker) -> Optional[str]:
        return await self._run(description, {"description": description}, invoker)

    @property
    def html(self) -> Optional[str]:
        return render_video_html(self.result) if self.result is not None else None


class ChatSessionStore:
    """In-memory chat sessions for the lifetime of the process."""

    def __init__(self):
        self._sessions: dict[str, ChatScreen] = {}

    def open(self, session_id: Optional[str] = None) -> ChatScreen:
        """Return the named session, creating it if needed."""
        if session_id and session_id in self._sessions:
            return self._sessions[session_id]

        screen = ChatScreen(session_id=session_id) if session_id else ChatScreen()
        self._sessions[screen.session_id] = screen
        return screen

    def get(self, session_id: str) -> Optional[ChatScreen]:
        return self._sessions.get(session_id)

    def drop(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
