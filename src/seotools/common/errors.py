"""Exception types raised by seotools."""
from __future__ import annotations


class SeoToolsError(RuntimeError):
    pass

class ConfigError(SeoToolsError):
    pass

class TemplateError(SeoToolsError):
    pass
