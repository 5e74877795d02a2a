import pytest

from app.agent.mermaid import clean_mermaid, strip_fences

HEADER = "flowchart TD"

SAMPLES = [
    "",
    "flowchart TD",
    'A["Age"]\nA --> B',
    '```mermaid\nflowchart TD\n    A["Age"]\n    A --> B\n```',
    'FLOWCHART td\n\n   \nA["Age"]\nflowchart TD\nB["Income"]\nFlowchart Td',
    '    A["Age"]```\n```text\n``````\nB --> C',
    "a `````` b ``` c ```` d",
]


def test_three_headers_and_a_fence_reduce_to_one_header():
    raw = 'flowchart TD\nA["Age"]\nflowchart TD\n```\nB["Income"]\nflowchart TD'

    assert clean_mermaid(raw, HEADER) == 'flowchart TD\nA["Age"]\nB["Income"]'


def test_missing_header_is_prepended():
    assert clean_mermaid('A["Age"] --> B["Loan"]', HEADER) == 'flowchart TD\nA["Age"] --> B["Loan"]'


def test_empty_input_yields_header_only():
    assert clean_mermaid("", HEADER) == HEADER
    assert clean_mermaid(None, HEADER) == HEADER


def test_header_detection_is_case_insensitive_and_trimmed():
    raw = '  FlowChart td  \nA["Age"]\nflowchart td\nB["Loan"]'

    assert clean_mermaid(raw, HEADER) == 'flowchart TD\nA["Age"]\nB["Loan"]'


def test_header_found_after_content_moves_to_the_top():
    raw = 'A["Age"]\nflowchart TD\nA --> B'

    assert clean_mermaid(raw, HEADER) == 'flowchart TD\nA["Age"]\nA --> B'


def test_indentation_is_preserved_and_blank_lines_dropped():
    raw = "flowchart TD\n\n    A[\"Age\"]\n\t\n        A --> B\n"

    assert clean_mermaid(raw, HEADER) == 'flowchart TD\n    A["Age"]\n        A --> B'


def test_similar_but_different_lines_are_not_treated_as_headers():
    raw = "flowchart TD;\nflowchart LR\ngraph TD"

    assert clean_mermaid(raw, HEADER) == "flowchart TD\nflowchart TD;\nflowchart LR\ngraph TD"


@pytest.mark.parametrize(
    "raw",
    [
        "```mermaid\nA --> B\n```",
        "```\nA --> B\n```",
        "A --> B ```",
        "prefix ```js inline``` suffix",
        "A[\"x\"]\n```Mermaid\n```",
    ],
)
def test_fence_markers_are_removed_anywhere(raw):
    assert "```" not in strip_fences(raw)
    assert "```" not in clean_mermaid(raw, HEADER)


def test_language_tag_is_removed_with_the_fence():
    assert clean_mermaid("```mermaid\nA --> B\n```", HEADER) == "flowchart TD\nA --> B"


def test_runs_of_backticks_never_leave_a_fence_behind():
    assert "```" not in strip_fences("a ``````` b")
    assert "```" not in strip_fences("``" + "```" + "`")


@pytest.mark.parametrize("raw", SAMPLES)
def test_clean_mermaid_is_idempotent(raw):
    once = clean_mermaid(raw, HEADER)

    assert clean_mermaid(once, HEADER) == once


@pytest.mark.parametrize("raw", SAMPLES)
def test_output_starts_with_exactly_one_header(raw):
    lines = clean_mermaid(raw, HEADER).split("\n")

    assert lines[0] == HEADER
    assert sum(1 for line in lines if line.strip().lower() == HEADER.lower()) == 1
    assert all(line.strip() for line in lines)


def test_default_header_comes_from_settings():
    with_default = clean_mermaid('A["Age"]')

    assert with_default.split("\n")[0] == HEADER
