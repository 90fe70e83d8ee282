"""FastAPI app exposing every SEO tool.

Endpoints:
- GET  /health
- GET  /tools
- POST /tools/writer        { "topic": "...", "keywords": "...", "tone": "Professional" }
- POST /tools/improver      { "content": "...", "goal": "Readability" }
- POST /tools/proofreader   { "content": "..." }
- POST /tools/strategy      { "business": "...", "audience": "...", "goals": "..." }
- POST /tools/url-cleaner   { "text": "..." }
- POST /tools/word-counter  { "text": "..." }
"""
from __future__ import annotations
import logging
import os
from functools import lru_cache
from typing import Literal

import uvicorn
from fastapi import Depends, FastAPI
from pydantic import BaseModel, Field

from seotools.client.gemini import GeminiClient
from seotools.common.config import GeminiConfig
from seotools.common.logging_setup import setup_logging
from seotools.common.schema import GenerationRequest
from seotools.tools import ai_tools
from seotools.tools.registry import TOOLS
from seotools.tools.url_cleaner import clean_urls
from seotools.tools.word_counter import count

LOGGER = logging.getLogger("seotools.serve.app")

Tone = Literal["Professional", "Conversational", "Witty & Fun", "Authoritative", "Empathetic"]
Goal = Literal["Readability", "SEO Optimization", "Engagement", "Persuasion", "Conciseness"]

class WriterIn(BaseModel):
    topic: str = Field(min_length=1)
    keywords: str = ""
    tone: Tone = "Professional"

class ImproverIn(BaseModel):
    content: str = Field(min_length=1)
    goal: Goal = "Readability"

class ProofreaderIn(BaseModel):
    content: str = Field(min_length=1)

class StrategyIn(BaseModel):
    business: str = Field(min_length=1)
    audience: str = ""
    goals: str = ""

class TextIn(BaseModel):
    text: str

class ToolOut(BaseModel):
    text: str
    ok: bool
    latency_ms: int

class TextOut(BaseModel):
    text: str

class StatsOut(BaseModel):
    words: int
    chars: int
    chars_no_space: int
    paragraphs: int
    read_time_minutes: int
    read_time: str

class ToolInfo(BaseModel):
    id: str
    label: str
    group: str
    description: str

@lru_cache(maxsize=1)
def get_config() -> GeminiConfig:
    """Environment config, parsed once per process."""
    return GeminiConfig.from_env()

def get_client(config: GeminiConfig = Depends(get_config)) -> GeminiClient:
    return GeminiClient(config)

app = FastAPI(title="SEO Tools", version="1.0.0")

@app.on_event("startup")
def _check_config_on_startup() -> None:
    """Parse config up front so a bad GEMINI_* value fails startup, not each request."""
    config = get_config()
    if not config.api_key:
        LOGGER.warning("GEMINI_API_KEY is empty; AI tools will fail authentication")

@app.get("/health")
def health(config: GeminiConfig = Depends(get_config)) -> dict[str, str]:
    return {"status": "ok", "model": config.model}

@app.get("/tools", response_model=list[ToolInfo])
def list_tools() -> list[ToolInfo]:
    return [ToolInfo(id=t.id, label=t.label, group=t.group, description=t.description) for t in TOOLS]

async def _run(client: GeminiClient, request: GenerationRequest) -> ToolOut:
    out = await ai_tools.run_tool(client, request)
    return ToolOut(text=out.text, ok=out.ok, latency_ms=out.latency_ms)

@app.post("/tools/writer", response_model=ToolOut)
async def writer(body: WriterIn, client: GeminiClient = Depends(get_client)) -> ToolOut:
    return await _run(client, ai_tools.writer_request(body.topic, body.keywords, body.tone))

@app.post("/tools/improver", response_model=ToolOut)
async def improver(body: ImproverIn, client: GeminiClient = Depends(get_client)) -> ToolOut:
    return await _run(client, ai_tools.improver_request(body.content, body.goal))

@app.post("/tools/proofreader", response_model=ToolOut)
async def proofreader(body: ProofreaderIn, client: GeminiClient = Depends(get_client)) -> ToolOut:
    return await _run(client, ai_tools.proofreader_request(body.content))

@app.post("/tools/strategy", response_model=ToolOut)
async def strategy(body: StrategyIn, client: GeminiClient = Depends(get_client)) -> ToolOut:
    return await _run(client, ai_tools.strategy_request(body.business, body.audience, body.goals))

@app.post("/tools/url-cleaner", response_model=TextOut)
def url_cleaner(body: TextIn) -> TextOut:
    return TextOut(text=clean_urls(body.text))

@app.post("/tools/word-counter", response_model=StatsOut)
def word_counter(body: TextIn) -> StatsOut:
    return StatsOut(**count(body.text).as_dict())

def main() -> None:
    setup_logging()
    uvicorn.run(
        app,
        host=os.getenv("SEOTOOLS_HOST", "127.0.0.1"),
        port=int(os.getenv("SEOTOOLS_PORT", "8000")),
    )

if __name__ == "__main__":
    main()
