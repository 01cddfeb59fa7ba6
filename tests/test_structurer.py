from __future__ import annotations

import dataclasses

import pytest

from autopilot.structurer import DEFAULT_RULES, AnalysisRecord, ParseTrace, SectionRule, parse_response


def _sample_reply() -> str:
    return (
        "Project Name\n"
        "autopilot\n"
        "\n"
        "Tech Stack\n"
        "- TypeScript\n"
        "- Node.js\n"
        "- VS Code API\n"
        "\n"
        "Project Purpose/Ideas\n"
        "- Analyze projects with AI\n"
        "- Generate onboarding notes\n"
        "\n"
        "Folder Structure Analysis\n"
        "src/ holds the extension entry point.\n"
        "out/ holds build output.\n"
        "\n"
        "Brief Summary\n"
        "A VS Code extension that asks DeepSeek to describe a workspace."
    )


def test_parses_all_five_sections():
    record = parse_response(_sample_reply())

    assert record.project_name == "autopilot"
    assert record.tech_stack == ("TypeScript", "Node.js", "VS Code API")
    assert record.project_ideas == ("Analyze projects with AI", "Generate onboarding notes")
    assert record.folder_structure_analysis == "src/ holds the extension entry point.\nout/ holds build output."
    assert record.summary == "A VS Code extension that asks DeepSeek to describe a workspace."


def test_text_without_recognized_sections_gives_defaults():
    assert parse_response("") == AnalysisRecord()
    assert parse_response("Hello there\nnothing useful here") == AnalysisRecord()


def test_project_name():
    assert parse_response("Project Name\nFoo").project_name == "Foo"


def test_project_name_joins_body_lines_with_spaces():
    record = parse_response("Project Name\n  Foo\nBar  ")
    assert record.project_name == "Foo Bar"


def test_tech_stack():
    assert parse_response("Tech Stack\n- Go\n- Docker").tech_stack == ("Go", "Docker")


def test_project_ideas():
    record = parse_response("Project Ideas\n- A dashboard\n- A CLI")
    assert record.project_ideas == ("A dashboard", "A CLI")


def test_project_purpose_heading_fills_ideas():
    record = parse_response("Project Purpose\n- Onboarding")
    assert record.project_ideas == ("Onboarding",)


def test_list_items_keep_blank_lines_as_empty_entries():
    record = parse_response("Tech Stack\n- Go\n   \n- Rust")
    assert record.tech_stack == ("Go", "", "Rust")


def test_list_items_strip_only_one_leading_marker():
    record = parse_response("Tech Stack\n- - nested\n-Go\n - Rust")
    assert record.tech_stack == ("- nested", "-Go", "- Rust")


def test_text_blocks_are_not_trimmed():
    record = parse_response("Folder Structure\n  src/ code\n  tests/ ")
    assert record.folder_structure_analysis == "  src/ code\n  tests/ "


def test_heading_match_is_case_insensitive_substring():
    record = parse_response("**2. TECH STACK:**\n- Python")
    assert record.tech_stack == ("Python",)


def test_keywords_in_body_are_ignored():
    record = parse_response("Overview\nThe tech stack is Go and the summary is short")
    assert record == AnalysisRecord()


def test_first_matching_rule_wins():
    record = parse_response("Project Name and Summary\nFoo")
    assert record.project_name == "Foo"
    assert record.summary == ""


def test_heading_without_body_gives_empty_values():
    record = parse_response("Project Name\n\nTech Stack\n\nSummary")
    assert record.project_name == ""
    assert record.tech_stack == ()
    assert record.summary == ""


def test_repeated_heading_last_write_wins():
    trace = ParseTrace()
    record = parse_response("Summary\nFirst\n\nSummary\nSecond", trace=trace)

    assert record.summary == "Second"
    assert trace.overwritten == ["summary"]
    assert trace.events[1].previous == "First"


def test_unrecognized_heading_is_dropped_and_traced():
    trace = ParseTrace()
    record = parse_response("Random Header\nsome text", trace=trace)

    assert record == AnalysisRecord()
    assert trace.unmatched == ["Random Header"]
    assert trace.matched == []


def test_extra_blank_line_turns_next_heading_into_body():
    # "\n\n\n" leaves a leading newline, so the next section's heading is empty
    trace = ParseTrace()
    record = parse_response("Project Name\nFoo\n\n\nSummary\nBar", trace=trace)

    assert record.project_name == "Foo"
    assert record.summary == ""
    assert trace.unmatched == [""]


def test_trace_does_not_change_result():
    assert parse_response(_sample_reply(), trace=ParseTrace()) == parse_response(_sample_reply())


def test_parsing_is_idempotent():
    first = parse_response(_sample_reply())
    second = parse_response(_sample_reply())
    assert first == second
    assert first is not second


def test_custom_rules_extend_the_table():
    rules = (SectionRule(("overview",), "summary", lambda body: " / ".join(body)),) + DEFAULT_RULES
    record = parse_response("Overview\nline one\nline two\n\nTech Stack\n- Go", rules=rules)

    assert record.summary == "line one / line two"
    assert record.tech_stack == ("Go",)


def test_record_is_immutable_and_serializes_camel_case():
    record = parse_response("Tech Stack\n- Go")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.summary = "changed"

    assert record.to_dict() == {
        "projectName": "",
        "techStack": ["Go"],
        "projectIdeas": [],
        "folderStructureAnalysis": "",
        "summary": "",
    }
