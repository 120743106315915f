from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from ai_writer.infrastructure.config import ApplicationConfig


class FakeGenerator:
    """Stand-in for the text generation capability.

    Returns ``reply`` (or raises ``error``) and records every prompt. When
    ``gate`` is set, each call blocks until the event fires.
    """

    def __init__(self, reply: str = "Generated text", error: Exception | None = None, gate: asyncio.Event | None = None):
        self.reply = reply
        self.error = error
        self.gate = gate
        self.prompts: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.reply


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_generator_cls():
    return FakeGenerator


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def app_config(tmp_path: Path) -> ApplicationConfig:
    return ApplicationConfig(
        openai_api_key="",
        database_url=f"sqlite:///{tmp_path / 'history.db'}",
        export_dir=str(tmp_path / "exports"),
        log_to_file=False,
    )
