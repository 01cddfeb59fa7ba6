"""
The prompt sent to the analysis service.
The five requested sections line up with the structurer's heading rules.
"""

from autopilot.workspace.snapshot import format_key_files

PROMPT_TEMPLATE = """Analyze this project structure and files. Provide:
1. Project name (from directory structure)
2. Tech stack (programming languages, frameworks, tools)
3. Project purpose/ideas (based on files and structure)
4. Folder structure analysis
5. Brief summary

Project structure:
{structure}

Key files content:
{key_files}"""


def build_prompt(structure: str, key_files: dict[str, str]) -> str:
    """Fill the prompt with the directory listing and the JSON-encoded key files."""
    return PROMPT_TEMPLATE.format(
        structure=structure,
        key_files=format_key_files(key_files),
    )
