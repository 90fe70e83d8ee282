"""Catalogue of available tools, in display order."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

@dataclass(frozen=True)
class ToolSpec:
    id: str
    label: str
    group: Literal["ai", "utility"]
    description: str

TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec("writer", "Article Writer", "ai",
             "Generate human-like, SEO-optimized long-form content instantly."),
    ToolSpec("improver", "Article Improver", "ai",
             "Elevate your existing drafts to professional standards."),
    ToolSpec("proofreader", "Proofreader", "ai",
             "Grammar check, spell check, and syntax correction with detailed change logs."),
    ToolSpec("strategy", "Strategy Maker", "ai",
             "Generate a comprehensive marketing roadmap tailored to your business."),
    ToolSpec("word-counter", "Word Counter", "utility",
             "Real-time analysis of your content density and reading time."),
    ToolSpec("url-cleaner", "URL Cleaner", "utility",
             "Remove tracking parameters (UTM, fbclid, etc.) from multiple links at once."),
)

def get_tool(tool_id: str) -> ToolSpec:
    for tool in TOOLS:
        if tool.id == tool_id:
            return tool
    raise KeyError(tool_id)
