from __future__ import annotations

import pytest

from passagekit.config import ScoringConfig, WeightConfig
from passagekit.scoring.matchers import KeywordMatcher
from passagekit.scoring.weights import WeightCalculator
from passagekit.types import TextBlock


@pytest.fixture
def calculator() -> WeightCalculator:
    return WeightCalculator(WeightConfig(), KeywordMatcher(ScoringConfig().interrogatives))


def test_heading_tag_factor_and_diversity(calculator):
    assert calculator.weight("h1", "Alpha beta gamma delta") == 3.5
    assert calculator.weight("h2", "Alpha beta gamma delta") == 3.0
    assert calculator.weight("h3", "Alpha beta gamma delta") == 2.5


def test_tag_lookup_is_case_insensitive(calculator):
    assert calculator.weight("LI", "Alpha beta gamma delta") == 1.3


def test_unknown_tag_uses_default_factor(calculator):
    assert calculator.weight("td", "Alpha beta gamma delta") == 1.5
    assert calculator.weight("blockquote", "Alpha beta gamma delta") == 1.5


def test_question_and_interrogative_bonuses(calculator):
    # diversity: 3 distinct of 4 tokens -> 0.375
    assert calculator.weight("p", "What is it? what") == 1.88


def test_interrogative_requires_whole_word(calculator):
    assert calculator.weight("p", "somewhat shows nothing") == 1.5


def test_length_bonus_uses_character_length(calculator):
    text = " ".join(["abcd"] * 30)
    assert len(text) == 149
    assert calculator.weight("p", text) == 1.22


def test_length_bonus_interval_is_open(calculator):
    text = "x" * 100
    assert calculator.weight("p", text) == 1.5
    text = "x" * 200
    assert calculator.weight("p", text) == 1.5


def test_empty_text_contributes_no_diversity(calculator):
    assert calculator.weight("div", "") == 0.6


def test_weigh_attaches_weight_to_block(calculator):
    block = TextBlock(text="Alpha beta gamma delta", is_heading=True, tag="h1")
    weighted = calculator.weigh(block)
    assert weighted.block is block
    assert weighted.semantic_weight == 3.5
    assert weighted.is_heading


def test_custom_tag_table():
    config = WeightConfig(tag_weights={"td": 4.0}, default_tag_weight=0.5)
    calculator = WeightCalculator(config, KeywordMatcher(["how"]))
    assert calculator.weight("td", "one two") == 4.5
    assert calculator.weight("p", "one two") == 1.0
