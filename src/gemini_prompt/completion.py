"""Gemini completion service over Google's OpenAI-compatible endpoint."""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Protocol
import httpx
from openai import AsyncOpenAI
from .config import Settings

class CompletionError(RuntimeError):
    pass

class CompletionService(Protocol):
    async def complete(self, prompt: str) -> str: ...

class GeminiCompletionService:
    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.verbose = settings.verbose
        # No timeout and no retries: a request settles once, however long it takes.
        self.http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(None))
        # Built on the first call so a missing key fails there, not at startup.
        self.client: Optional[AsyncOpenAI] = None
        self._log(f"✓ Using {settings.model} at {settings.base_url}")

    def _log(self, msg: str) -> None:
        if self.verbose:
            print(msg)

    def _build_client(self) -> AsyncOpenAI:
        if not self.settings.api_key:
            raise CompletionError("API_KEY is not set")
        return AsyncOpenAI(
            api_key=self.settings.api_key,
            base_url=self.settings.base_url,
            http_client=self.http,
            max_retries=0,
        )

    async def complete(self, prompt: str) -> str:
        if self.client is None:
            self.client = self._build_client()
        messages: List[Dict[str, Any]] = [{"role": "user", "content": prompt}]
        resp = await self.client.chat.completions.create(
            model=self.settings.model,
            messages=messages,
        )
        if not resp.choices:
            raise CompletionError("Empty response from model")
        text = resp.choices[0].message.content
        if not text:
            raise CompletionError("Empty response from model")
        return text

    async def aclose(self) -> None:
        if self.client is not None:
            await self.client.close()
        await self.http.aclose()
