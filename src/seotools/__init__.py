"""
SEO Tools package.

Provides:
- AI content tools (article writer, improver, proofreader, strategy maker)
  backed by the Gemini generateContent API with bounded retries
- Local utilities (tracking-parameter URL cleaner, word/character counter)
- A FastAPI app and a command-line runner exposing every tool
"""

__version__ = "1.0.0"
