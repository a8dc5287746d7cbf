"""
Live check: run each assistant workflow once against the real Gemini API.

Usage:
    python scripts/try_workflows.py                  # all four
    python scripts/try_workflows.py --only chat      # one workflow
    python scripts/try_workflows.py --image cat.png  # real image for /image
"""

import argparse
import asyncio
import base64
import mimetypes
import os, sys, time
from dotenv import load_dotenv

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from assistant.config import load_settings
from assistant.errors import MissingCredentialError
from assistant.invoker import ApiInvoker
from assistant.logger import RequestLogger
from assistant.models import ImageData, ModelTier
from assistant.providers import GoogleProvider
from assistant.screens import ChatScreen, ImageScreen, QuizScreen, VideoScreen

load_dotenv()

QUIZ = """1. What is the capital of Australia?
A) Sydney
B) Melbourne
C) Canberra
D) Perth

2. Which element has the chemical symbol "Fe"?
A) Fluorine
B) Iron
C) Lead"""

# 1x1 red PNG
TINY_PNG = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8DwHwAFBQIAX8jx0gAAAABJRU5ErkJggg=="
)


def banner(title: str):
    print("=" * 60)
    print(title)
    print("=" * 60)


def report(screen, t0: float):
    print(f"  Model:  {screen.model_id}")
    print(f"  Status: {screen.status.value}")
    print(f"  Time:   {time.time() - t0:.2f}s")
    if screen.error_message:
        print(f"  Error:  {screen.error_message}")
    print()


async def run_quiz(invoker):
    banner("QUIZ (grounded)")
    screen = QuizScreen()
    t0 = time.time()
    await screen.submit(QUIZ, invoker)
    for answer in screen.rendered():
        correct = [o.text for o in answer.options if o.is_correct] or ["(no option matched)"]
        print(f"  Q{answer.number}: {answer.question}")
        print(f"      -> {correct[0]}")
    report(screen, t0)


async def run_chat(invoker):
    banner("CHAT (high tier, thinking on)")
    screen = ChatScreen()
    t0 = time.time()
    await screen.submit("In two sentences, why is the sky blue?", invoker,
                        tier=ModelTier.HIGH, thinking_mode=True)
    print(f"  Reply: {(screen.result or '')[:300]}")
    report(screen, t0)


async def run_image(invoker, image_path):
    banner("IMAGE")
    if image_path:
        with open(image_path, "rb") as f:
            data = base64.b64encode(f.read()).decode()
        mime_type = mimetypes.guess_type(image_path)[0] or "image/png"
        image = ImageData(data=data, mime_type=mime_type)
    else:
        image = ImageData(data=TINY_PNG, mime_type="image/png")
    screen = ImageScreen()
    t0 = time.time()
    await screen.submit(image, "Describe this image in one sentence.", invoker)
    print(f"  Result: {(screen.result or '')[:300]}")
    report(screen, t0)


async def run_video(invoker):
    banner("VIDEO")
    screen = VideoScreen()
    t0 = time.time()
    await screen.submit("How to brew pour-over coffee at home", invoker)
    print(f"  Result: {(screen.result or '')[:300]}")
    report(screen, t0)


async def main(args):
    try:
        settings = load_settings()
    except MissingCredentialError as e:
        sys.exit(f"{e} (add it to .env)")

    provider = GoogleProvider(
        api_key=settings.gemini_api_key,
        base_url=settings.gemini_base_url,
        timeout=settings.timeout_seconds,
    )
    request_logger = RequestLogger()
    invoker = ApiInvoker(provider, mode="prod", request_logger=request_logger)

    try:
        if args.only in (None, "quiz"):
            await run_quiz(invoker)
        if args.only in (None, "chat"):
            await run_chat(invoker)
        if args.only in (None, "image"):
            await run_image(invoker, args.image)
        if args.only in (None, "video"):
            await run_video(invoker)
    finally:
        await provider.close()

    failed = [log for log in request_logger.get_logs() if log["status"] == "error"]
    for log in failed:
        print(f"  [{log['operation']}] {log['error']}")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run assistant workflows against Gemini")
    parser.add_argument("--only", choices=["quiz", "chat", "image", "video"])
    parser.add_argument("--image", help="Path to an image for the image workflow")
    asyncio.run(main(parser.parse_args()))
