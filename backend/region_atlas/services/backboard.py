"""
Backboard.io integration service.

LLM transport for the region-lookup boundary: one shared assistant, a
throw-away thread per question. Parsing and validation live in
RegionLookupService.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from backboard import BackboardClient

from region_atlas.config import settings
from region_atlas.logging import get_logger
from region_atlas.models import (
    AssistantCreated, ThreadCreated, ThreadDeleted, ChatResponse,
)
from region_atlas.services.prompts import build_region_assistant_prompt

logger = get_logger('services.backboard')
_T = TypeVar("_T")

REGION_ASSISTANT_NAME = "Era Atlas: Region Lookup"


class BackboardService:
    """Service for interacting with Backboard.io."""

    def __init__(self):
        self.client = None
        self._initialized = False
        self._assistant_id: str | None = None
        self._assistant_lock = asyncio.Lock()

    async def initialize(self):
        if not settings.BACKBOARD_API_KEY:
            logger.warning("BACKBOARD_API_KEY not set - AI region lookup will be disabled")
            return

        try:
            self.client = BackboardClient(api_key=settings.BACKBOARD_API_KEY)
            self._initialized = True
            logger.info("Backboard client initialized")
        except Exception as e:
            logger.error(f"Failed to initialize Backboard: {e}")

    @property
    def is_available(self) -> bool:
        return self._initialized and self.client is not None

    def _is_transient_error(self, error: Exception) -> bool:
        if isinstance(error, (TimeoutError, asyncio.TimeoutError)):
            return True

        message = str(error).lower()
        transient_tokens = (
            "timed out",
            "timeout",
            "rate limit",
            "too many requests",
            "temporarily unavailable",
            "connection reset",
            "connection aborted",
            "connection refused",
            "bad gateway",
            "service unavailable",
            "gateway timeout",
            "429",
            "502",
            "503",
            "504",
        )
        return any(token in message for token in transient_tokens)

    async def _run_with_retry(
        self,
        operation_name: str,
        operation: Callable[[], Awaitable[_T]],
    ) -> _T:
        max_retries = max(int(settings.BACKBOARD_MAX_RETRIES), 0)
        total_attempts = max_retries + 1
        base_delay = max(float(settings.BACKBOARD_RETRY_BASE_SECONDS), 0.0)
        max_delay = max(float(settings.BACKBOARD_RETRY_MAX_SECONDS), base_delay)

        attempt = 1
        while True:
            try:
                return await operation()
            except Exception as error:
                should_retry = attempt < total_attempts and self._is_transient_error(error)
                if not should_retry:
                    raise

                delay = min(base_delay * (2 ** (attempt - 1)), max_delay)
                logger.warning(
                    "Backboard %s failed (attempt %d/%d): %s. Retrying in %.2fs",
                    operation_name,
                    attempt,
                    total_attempts,
                    error,
                    delay,
                )
                if delay > 0:
                    await asyncio.sleep(delay)
                attempt += 1

    # ── Assistants ──

    async def create_region_assistant(self) -> AssistantCreated:
        if not self.is_available:
            return AssistantCreated(success=False)

        try:
            assistant = await self._run_with_retry(
                "create_assistant",
                lambda: self.client.create_assistant(
                    name=REGION_ASSISTANT_NAME,
                    description=build_region_assistant_prompt(),
                ),
            )
            logger.info(f"Created region assistant: {assistant.assistant_id}")
            return AssistantCreated(success=True, id=str(assistant.assistant_id))
        except Exception as e:
            logger.error(f"Failed to create region assistant: {e}")
            return AssistantCreated(success=False)

    async def ensure_region_assistant(self) -> str | None:
        async with self._assistant_lock:
            if self._assistant_id:
                return self._assistant_id
            result = await self.create_region_assistant()
            if result.success:
                self._assistant_id = result.id
            return self._assistant_id

    # ── Threads ──

    async def create_thread(self, assistant_id: str) -> ThreadCreated:
        if not self.is_available:
            return ThreadCreated(success=False)

        try:
            thread = await self._run_with_retry(
                "create_thread",
                lambda: self.client.create_thread(assistant_id=assistant_id),
            )
            return ThreadCreated(success=True, id=str(thread.thread_id))
        except Exception as e:
            logger.error(f"Failed to create thread for assistant {assistant_id}: {e}")
            return ThreadCreated(success=False)

    async def delete_thread(self, thread_id: str) -> ThreadDeleted:
        if not self.is_available:
            return ThreadDeleted(success=False)

        try:
            await self.client.delete_thread(thread_id=thread_id)
            return ThreadDeleted(success=True)
        except Exception as e:
            logger.error(f"Failed to delete thread: {e}")
            return ThreadDeleted(success=False)

    # ── Chat ──

    async def chat(self, thread_id: str, prompt: str) -> ChatResponse:
        if not self.is_available:
            return ChatResponse(success=False, error="Backboard service unavailable")

        llm_provider = str(getattr(settings, "LLM_PROVIDER", "") or "").strip()
        model_name = str(getattr(settings, "MODEL_NAME", "") or "").strip()
        add_message_kwargs: dict[str, Any] = {
            "thread_id": thread_id,
            "content": prompt,
            "memory": "off",
        }
        if llm_provider:
            add_message_kwargs["llm_provider"] = llm_provider
        if model_name:
            add_message_kwargs["model_name"] = model_name

        try:
            response = await self._run_with_retry(
                "add_message",
                lambda: self.client.add_message(**add_message_kwargs),
            )
        except Exception as e:
            logger.error(f"Chat failed for thread {thread_id}: {e}")
            return ChatResponse(success=False, error=str(e))

        input_tokens = getattr(response, "input_tokens", None)
        output_tokens = getattr(response, "output_tokens", None)
        total_tokens = getattr(response, "total_tokens", None)
        logger.info(
            "Backboard usage thread=%s provider=%s model=%s tokens=%s/%s/%s",
            thread_id,
            getattr(response, "model_provider", None) or "(unknown)",
            getattr(response, "model_name", None) or "(unknown)",
            input_tokens if input_tokens is not None else "?",
            output_tokens if output_tokens is not None else "?",
            total_tokens if total_tokens is not None else "?",
        )
        return ChatResponse(
            success=True,
            response=response.content,
            model_provider=getattr(response, "model_provider", None),
            model_name=getattr(response, "model_name", None),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            total_tokens=total_tokens,
        )

    async def ask(self, prompt: str) -> ChatResponse:
        """One-shot question on a fresh thread of the region assistant."""
        if not self.is_available:
            return ChatResponse(success=False, error="Backboard service unavailable")

        assistant_id = await self.ensure_region_assistant()
        if not assistant_id:
            return ChatResponse(success=False, error="Region assistant unavailable")

        thread = await self.create_thread(assistant_id)
        if not thread.success or not thread.id:
            return ChatResponse(success=False, error="Failed to create lookup thread")

        try:
            return await self.chat(thread_id=thread.id, prompt=prompt)
        finally:
            await self.delete_thread(thread.id)
