from __future__ import annotations

import pytest

from seotools.common.errors import TemplateError
from seotools.common.templates import build_request, load_template, render_prompt, split_template
from seotools.tools import ai_tools


def test_render_prompt_substitution() -> None:
    tpl = "Hello {{name}}, tone {{ tone }}!"
    out = render_prompt(tpl, name="world", tone="Witty & Fun")
    assert out == "Hello world, tone Witty & Fun!"


def test_render_prompt_missing_field_is_empty() -> None:
    assert render_prompt("Keywords: {{keywords}}") == "Keywords: "


@pytest.mark.parametrize("name", ["writer", "improver", "proofreader", "strategy"])
def test_bundled_templates_have_both_sections(name: str) -> None:
    system, user = split_template(load_template(name))
    assert system
    assert "{{" in user


def test_split_template_without_tags() -> None:
    assert split_template("  just a prompt \n") == ("", "just a prompt")


def test_split_template_rejects_half_tagged() -> None:
    with pytest.raises(TemplateError):
        split_template("<|system|> only system")
    with pytest.raises(TemplateError):
        split_template("<|user|> u <|system|> s")


def test_load_template_from_path(tmp_path) -> None:
    path = tmp_path / "custom.txt"
    path.write_text("<|system|>\nBe brief.\n<|user|>\nQ: {{q}}\n", encoding="utf-8")
    req = build_request(load_template(str(path)), q="why?")
    assert req.system_instruction == "Be brief."
    assert req.user_prompt == "Q: why?"


def test_load_missing_template() -> None:
    with pytest.raises(TemplateError):
        load_template("no-such-tool")


def test_writer_request_layout() -> None:
    req = ai_tools.writer_request("Remote work", "remote, nomad", "Conversational")
    assert req.user_prompt == "Topic: Remote work\nTarget Keywords: remote, nomad\nTone: Conversational"
    assert req.system_instruction.startswith("You are a professional, industry-grade SEO Article Writer.")


def test_improver_request_defaults_to_readability() -> None:
    req = ai_tools.improver_request("Some draft")
    assert req.user_prompt == "Content to Improve: Some draft\nGoal: Readability"
    assert "Content Editor" in req.system_instruction


def test_proofreader_request_layout() -> None:
    req = ai_tools.proofreader_request("Teh text")
    assert req.user_prompt == "Text to Proofread: Teh text"
    assert "horizontal rule (---)" in req.system_instruction


def test_strategy_request_layout() -> None:
    req = ai_tools.strategy_request("Vegan Bakery", "Gen Z", "Brand awareness")
    assert req.user_prompt == "Business: Vegan Bakery\nAudience: Gen Z\nGoals: Brand awareness"
    assert "Chief Marketing Officer" in req.system_instruction


def test_request_is_immutable() -> None:
    req = ai_tools.proofreader_request("x")
    with pytest.raises(AttributeError):
        req.user_prompt = "y"  # type: ignore[misc]
