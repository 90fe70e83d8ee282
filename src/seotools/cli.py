"""Command-line runner for the SEO tools.

Examples:
    seotools writer --topic "Remote work in 2026" --keywords "remote work" --tone Conversational
    seotools url-cleaner --text "https://example.com/?utm_source=x"
    seotools word-counter < draft.md
"""
from __future__ import annotations
import argparse
import asyncio
import json
import logging
import sys

from seotools.client.gemini import GeminiClient
from seotools.common.clipboard import copy_to_clipboard
from seotools.common.config import GeminiConfig
from seotools.common.errors import SeoToolsError
from seotools.common.logging_setup import setup_logging
from seotools.common.schema import GenerationRequest
from seotools.tools import ai_tools
from seotools.tools.registry import get_tool
from seotools.tools.url_cleaner import clean_urls
from seotools.tools.word_counter import count

LOGGER = logging.getLogger("seotools.cli")

def _text_arg(value: str | None) -> str:
    """Use the flag when given, else read stdin."""
    return value if value is not None else sys.stdin.read()

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="seotools", description="Content and SEO helper tools")
    ap.add_argument("--cfg", default=None, help="YAML config path (defaults to GEMINI_* env vars)")
    ap.add_argument("--copy", action="store_true", help="Also copy the result to the clipboard")
    sub = ap.add_subparsers(dest="tool", required=True)

    p = sub.add_parser("writer", help=get_tool("writer").description)
    p.add_argument("--topic", required=True)
    p.add_argument("--keywords", default="", help="Comma separated")
    p.add_argument("--tone", default=ai_tools.TONES[0], choices=ai_tools.TONES)

    p = sub.add_parser("improver", help=get_tool("improver").description)
    p.add_argument("--content", default=None, help="Text to improve (stdin if omitted)")
    p.add_argument("--goal", default=ai_tools.GOALS[0], choices=ai_tools.GOALS)

    p = sub.add_parser("proofreader", help=get_tool("proofreader").description)
    p.add_argument("--content", default=None, help="Text to proofread (stdin if omitted)")

    p = sub.add_parser("strategy", help=get_tool("strategy").description)
    p.add_argument("--business", required=True, help="Business type / niche")
    p.add_argument("--audience", default="")
    p.add_argument("--goals", default="")

    p = sub.add_parser("url-cleaner", help=get_tool("url-cleaner").description)
    p.add_argument("--text", default=None, help="URLs, one per line (stdin if omitted)")

    p = sub.add_parser("word-counter", help=get_tool("word-counter").description)
    p.add_argument("--text", default=None, help="Content to analyze (stdin if omitted)")
    return ap

def _ai_request(args: argparse.Namespace) -> GenerationRequest | None:
    """Build the request, or None when the primary field is empty."""
    if args.tool == "writer":
        if not args.topic:
            return None
        return ai_tools.writer_request(args.topic, args.keywords, args.tone)
    if args.tool == "strategy":
        if not args.business:
            return None
        return ai_tools.strategy_request(args.business, args.audience, args.goals)
    content = _text_arg(args.content)
    if not content.strip():
        return None
    if args.tool == "improver":
        return ai_tools.improver_request(content, args.goal)
    return ai_tools.proofreader_request(content)

def run(args: argparse.Namespace, client: GeminiClient | None = None) -> tuple[str, int]:
    """Execute one tool; returns (output text, exit code)."""
    if args.tool == "url-cleaner":
        return clean_urls(_text_arg(args.text)), 0
    if args.tool == "word-counter":
        return json.dumps(count(_text_arg(args.text)).as_dict(), indent=2), 0

    request = _ai_request(args)
    if request is None:
        return "Error: input text is empty", 2
    if client is None:
        cfg = GeminiConfig.from_yaml(args.cfg) if args.cfg else GeminiConfig.from_env()
        client = GeminiClient(cfg)
    out = asyncio.run(ai_tools.run_tool(client, request))
    LOGGER.info("Latency: %sms", out.latency_ms)
    return out.text, 0 if out.ok else 1

def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        text, code = run(args)
    except SeoToolsError as e:
        print(f"Error: {e}")
        return 2
    print(text)
    if args.copy:
        copy_to_clipboard(text)
    return code

if __name__ == "__main__":
    sys.exit(main())
