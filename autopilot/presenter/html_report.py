"""
Render an AnalysisRecord as a standalone HTML page.
"""

import html
import logging
import pathlib
import uuid
import webbrowser
from pathlib import Path

from autopilot.structurer import AnalysisRecord

logger = logging.getLogger(__name__)

OUTPUT_DIR = Path("autopilot_outputs")

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Project Analysis</title>
    <style>
        body {{ padding: 20px; font-family: Arial, sans-serif; }}
        h1 {{ color: #1a73e8; }}
        .section {{ margin-bottom: 25px; }}
        .badge {{ background: #e8f0fe; color: #1967d2; padding: 2px 8px; border-radius: 4px; margin: 2px; }}
    </style>
</head>
<body>
    <h1>{project_name}</h1>

    <div class="section">
        <h3>\U0001F4DA Tech Stack</h3>
        {tech_stack}
    </div>

    <div class="section">
        <h3>\U0001F4A1 Project Ideas</h3>
        <ul>{project_ideas}</ul>
    </div>

    <div class="section">
        <h3>\U0001F4C1 Structure Analysis</h3>
        <pre>{folder_structure}</pre>
    </div>

    <div class="section">
        <h3>\U0001F4DD Summary</h3>
        <p>{summary}</p>
    </div>
</body>
</html>
"""


def render_html(record: AnalysisRecord) -> str:
    """Tech stack as badges, ideas as a list, structure preformatted, summary as text."""
    esc = html.escape
    return PAGE_TEMPLATE.format(
        project_name=esc(record.project_name),
        tech_stack=" ".join(f'<span class="badge">{esc(t)}</span>' for t in record.tech_stack),
        project_ideas="".join(f"<li>{esc(i)}</li>" for i in record.project_ideas),
        folder_structure=esc(record.folder_structure_analysis),
        summary=esc(record.summary),
    )


def write_report(record: AnalysisRecord, output_path: str | Path | None = None) -> Path:
    """Write the page to output_path, or a fresh file under autopilot_outputs/."""
    if output_path is None:
        path = OUTPUT_DIR / f"project_analysis_{uuid.uuid4().hex}.html"
    else:
        path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_html(record), encoding="utf-8")
    logger.info("Wrote report to %s", path)
    return path


def show_report(record: AnalysisRecord, output_path: str | Path | None = None) -> Path:
    """Write the page and open it in the default browser."""
    path = write_report(record, output_path)
    webbrowser.open(pathlib.Path(path).resolve().as_uri())
    return path
