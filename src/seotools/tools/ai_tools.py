"""AI content tools: each pairs a bundled instruction template with a prompt layout."""
from __future__ import annotations
import logging
import time
from dataclasses import dataclass

from seotools.client.gemini import GeminiClient
from seotools.common.schema import GenerationRequest
from seotools.common.templates import build_request, load_template

LOGGER = logging.getLogger("seotools.tools.ai")

TONES = ("Professional", "Conversational", "Witty & Fun", "Authoritative", "Empathetic")
GOALS = ("Readability", "SEO Optimization", "Engagement", "Persuasion", "Conciseness")

@dataclass
class ToolOutput:
    """Rendered tool result; failures carry "Error: ..." text and ok=False."""
    text: str
    ok: bool
    latency_ms: int

def writer_request(topic: str, keywords: str = "", tone: str = TONES[0]) -> GenerationRequest:
    return build_request(load_template("writer"), topic=topic, keywords=keywords, tone=tone)

def improver_request(content: str, goal: str = GOALS[0]) -> GenerationRequest:
    return build_request(load_template("improver"), content=content, goal=goal)

def proofreader_request(content: str) -> GenerationRequest:
    return build_request(load_template("proofreader"), content=content)

def strategy_request(business: str, audience: str = "", goals: str = "") -> GenerationRequest:
    return build_request(load_template("strategy"), business=business, audience=audience, goals=goals)

async def run_tool(client: GeminiClient, request: GenerationRequest) -> ToolOutput:
    """
    Invoke the client once and render its result.

    Args:
        client: Configured Gemini client.
        request: Request produced by one of the *_request builders.
    """
    start = time.time()
    result = await client.generate(request)
    latency_ms = int((time.time() - start) * 1000)
    if not result.ok:
        LOGGER.info("Tool call failed after %sms: %s", latency_ms, result.message)
    return ToolOutput(text=result.render(), ok=result.ok, latency_ms=latency_ms)
