"""Assistant endpoints: quiz, chat, image and video screens.

Each POST returns the screen's state after the submission. Validation and
remote failures are reported in error_message with HTTP 200; only malformed
request bodies or query parameters produce 4xx responses.

Query Parameters (all POST endpoints):
- mode: "mock" for canned responses, "prod" for Gemini
- error: simulate a remote failure in mock mode (rate_limit, timeout, 500)
- delay: artificial mock latency in milliseconds (max 30000)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request

from assistant.invoker import ApiInvoker
from assistant.models import (
    ChatRequest,
    ChatResponse,
    ChatTranscript,
    ImageRequest,
    ImageResponse,
    ModelOption,
    ModelTier,
    MODEL_IDS,
    MODEL_LABELS,
    QuizRequest,
    QuizResponse,
    VideoRequest,
    VideoResponse,
)
from assistant.request_builder import THINKING_TIER
from assistant.screens import ChatSessionStore, ImageScreen, QuizScreen, VideoScreen

router = APIRouter(prefix="/ai", tags=["assistant"])


def get_invoker(
    request: Request,
    mode: str = Query(default="prod", pattern="^(mock|prod)$"),
    error: Optional[str] = Query(default=None, pattern="^(rate_limit|timeout|500)$"),
    delay: int = Query(default=0, ge=0, le=30000),
    x_mock_scenario: Optional[str] = Header(default=None),
) -> ApiInvoker:
    """Build an invoker bound to the provider for this request's mode."""
    providers = request.app.state.providers
    if mode == "mock":
        provider = providers.get_provider("mock", scenario=x_mock_scenario, error=error, delay_ms=delay)
    else:
        provider = providers.get_provider("prod")
    return ApiInvoker(provider, mode=mode, request_logger=request.app.state.request_logger)


def get_chat_sessions(request: Request) -> ChatSessionStore:
    return request.app.state.chat_sessions


@router.get("/models", response_model=list[ModelOption])
async def list_models():
    """Chat model tiers, cheapest first."""
    return [
        ModelOption(
            tier=tier,
            model=MODEL_IDS[tier],
            label=MODEL_LABELS[tier],
            supports_thinking=tier == THINKING_TIER,
        )
        for tier in ModelTier
    ]


@router.post("/quiz", response_model=QuizResponse)
async def solve_quiz(body: QuizRequest, invoker: ApiInvoker = Depends(get_invoker)):
    """
    Solve pasted multiple-choice questions with Google Search grounding.

    The correct option of each question is flagged in `rendered`. If the
    model's answer matches none of the options, nothing is flagged.
    """
    screen = QuizScreen()
    await screen.submit(body.quiz_text, invoker)
    return QuizResponse(
        **screen.snapshot(),
        mode=invoker.mode,
        result=screen.result,
        rendered=screen.rendered(),
    )


@router.post("/chat", response_model=ChatResponse)
async def chat(
    body: ChatRequest,
    invoker: ApiInvoker = Depends(get_invoker),
    sessions: ChatSessionStore = Depends(get_chat_sessions),
):
    """
    Send a chat message. Omit session_id to start a new conversation.

    Thinking mode only takes effect with the "high" tier.
    """
    screen = sessions.open(body.session_id)
    rejection = await screen.submit(body.message, invoker, tier=body.tier, thinking_mode=body.thinking_mode)

    snapshot = screen.snapshot()
    if rejection:
        # Reported to this caller only; the in-flight submission owns the session state
        snapshot["error_message"] = rejection

    return ChatResponse(
        **snapshot,
        mode=invoker.mode,
        session_id=screen.session_id,
        messages=screen.messages,
        result=screen.result,
        tier=screen.tier,
        thinking_mode=screen.thinking_mode,
    )


@router.get("/chat/{session_id}", response_model=ChatTranscript)
async def get_chat(session_id: str, sessions: ChatSessionStore = Depends(get_chat_sessions)):
    """Get the transcript of a chat session."""
    screen = sessions.get(session_id)
    if screen is None:
        raise HTTPException(status_code=404, detail="Chat session not found")
    return ChatTranscript(session_id=screen.session_id, messages=screen.messages)


@router.delete("/chat/{session_id}")
async def delete_chat(session_id: str, sessions: ChatSessionStore = Depends(get_chat_sessions)):
    """Discard a chat session."""
    if not sessions.drop(session_id):
        raise HTTPException(status_code=404, detail="Chat session not found")
    return {"status": "deleted"}


@router.post("/image", response_model=ImageResponse)
async def analyze_image(body: ImageRequest, invoker: ApiInvoker = Depends(get_invoker)):
    """Ask a question about one base64-encoded image."""
    screen = ImageScreen()
    await screen.submit(body.image, body.prompt, invoker)
    return ImageResponse(**screen.snapshot(), mode=invoker.mode, result=screen.result)


@router.post("/video", response_model=VideoResponse)
async def analyze_video(body: VideoRequest, invoker: ApiInvoker = Depends(get_invoker)):
    """Analyze a video from its title or description."""
    screen = VideoScreen()
    await screen.submit(body.description, invoker)
    return VideoResponse(
        **screen.snapshot(),
        mode=invoker.mode,
        result=screen.result,
        html=screen.html,
    )
