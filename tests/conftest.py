"""Pytest fixtures for gherkin_context tests."""

from pathlib import Path

import pytest

from gherkin_context.document.index import DocumentIndex
from gherkin_context.resolve.outline import OutlineNameSubstitutor
from gherkin_context.resolve.resolver import ScenarioResolver

# Line numbers below are asserted on; keep the layout stable.
ARITHMETIC_FEATURE = "\n".join([
    "@suite @team:checkout",                   # 1
    "Feature: Arithmetic",                     # 2
    "",                                        # 3
    "  Background:",                           # 4
    "    Given a calculator",                  # 5
    "    And it is cleared",                   # 6
    "",                                        # 7
    "  @smoke",                                # 8
    "  Scenario: Power on",                    # 9
    "    When I press on",                     # 10
    "    Then the display shows 0",            # 11
    "",                                        # 12
    "  @math",                                 # 13
    "  Scenario Outline: Add <a> and <b>",     # 14
    "    When I add <a> and <b>",              # 15
    "    Then the result is <sum>",            # 16
    "",                                        # 17
    "    Examples:",                           # 18
    "      | a | b | sum |",                   # 19
    "      | 1 | 2 | 3   |",                   # 20
    "      | 3 | 4 | 7   |",                   # 21
    "",
])

LINES_FEATURE = "\n".join([
    "Feature: Lines",      # 1
    "  Background:",       # 2
    "    Given a",         # 3
    "    And b",           # 4
    "  Scenario: s",       # 5
    "    When c",          # 6
    "    Then d",          # 7
    "",
])

NO_BACKGROUND_FEATURE = "\n".join([
    "Feature: Bare",               # 1
    "  Scenario: only",            # 2
    "    Given something",         # 3
    "",
])

TWO_TABLES_FEATURE = "\n".join([
    "Feature: Payments",                           # 1
    "  Scenario Outline: Pay <amount> in <currency>",  # 2
    "    When I pay <amount> in <currency>",        # 3
    "",                                             # 4
    "    Examples: domestic",                       # 5
    "      | amount | currency |",                  # 6
    "      | 10     | EUR      |",                  # 7
    "",                                             # 8
    "    Examples: foreign",                        # 9
    "      | currency | amount |",                  # 10
    "      | USD      | 20     |",                  # 11
    "      | GBP      | 30     |",                  # 12
    "",
])

MALFORMED_FEATURE = "this is not gherkin\n  Given nothing\n"


@pytest.fixture
def index() -> DocumentIndex:
    index = DocumentIndex()
    index.record_source("features/arithmetic.feature", ARITHMETIC_FEATURE)
    index.record_source("features/lines.feature", LINES_FEATURE)
    index.record_source("features/bare.feature", NO_BACKGROUND_FEATURE)
    index.record_source("features/broken.feature", MALFORMED_FEATURE)
    index.record_source("features/payments.feature", TWO_TABLES_FEATURE)
    return index


@pytest.fixture
def arithmetic(index):
    return index.resolve("features/arithmetic.feature")


@pytest.fixture
def substitutor() -> OutlineNameSubstitutor:
    return OutlineNameSubstitutor()


@pytest.fixture
def resolver(substitutor) -> ScenarioResolver:
    return ScenarioResolver(substitutor=substitutor)


@pytest.fixture
def feature_file(tmp_path: Path) -> Path:
    path = tmp_path / "arithmetic.feature"
    path.write_text(ARITHMETIC_FEATURE, encoding="utf-8")
    return path
