from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from autopilot.analysis import AnalysisConfig
from autopilot.analysis import client, service
from autopilot.errors import AnalysisRequestError
from autopilot.orchestration import run_analysis

REPLY = (
    "Project Name\n"
    "demo\n"
    "\n"
    "Tech Stack\n"
    "- Python\n"
    "\n"
    "Summary\n"
    "A demo project."
)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "demo"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.py").write_text("print('hi')\n")
    (root / "requirements.txt").write_text("requests\n")
    return root


def test_run_analysis_happy_path(project: Path, tmp_path: Path, monkeypatch) -> None:
    prompts = []

    def fake_request(prompt, config):
        prompts.append(prompt)
        return REPLY

    monkeypatch.setattr(service, "request_analysis", fake_request)
    messages: list[str] = []
    output = tmp_path / "out" / "report.html"

    result = run_analysis(project, AnalysisConfig(api_key="k"), progress=messages.append, output_path=output)

    assert result.error is None
    assert result.root == project.resolve()
    assert result.record.project_name == "demo"
    assert result.record.tech_stack == ("Python",)
    assert result.record.summary == "A demo project."
    assert result.raw_response == REPLY
    assert result.html_path == output
    assert output.is_file()
    assert messages == [
        "Scanning project structure...",
        "Identifying key files...",
        "Consulting DeepSeek AI...",
        "Rendering results...",
    ]
    assert "requirements.txt\nsrc/\nmain.py\n" in prompts[0]
    assert '"requirements.txt": "requests\\n"' in prompts[0]


def test_run_analysis_without_render(project: Path, monkeypatch) -> None:
    monkeypatch.setattr(service, "request_analysis", lambda prompt, config: REPLY)
    messages: list[str] = []

    result = run_analysis(project, AnalysisConfig(api_key="k"), progress=messages.append, render=False)

    assert result.html_path is None
    assert result.record.project_name == "demo"
    assert "Rendering results..." not in messages


@pytest.mark.parametrize("root", [None, "does/not/exist"])
def test_missing_workspace_aborts_before_scanning(root, monkeypatch) -> None:
    monkeypatch.setattr(service, "request_analysis", lambda *a: pytest.fail("service called"))
    messages: list[str] = []

    result = run_analysis(root, AnalysisConfig(api_key="k"), progress=messages.append)

    assert result.error == "No workspace folder found!"
    assert result.record is None
    assert messages == []


def test_missing_api_key_reported_once(project: Path, monkeypatch) -> None:
    monkeypatch.setattr(client.requests, "post", lambda *a, **kw: pytest.fail("network called"))

    result = run_analysis(project, AnalysisConfig(api_key=""), render=False)

    assert result.record is None
    assert result.error == (
        "Analysis failed: DeepSeek API key not configured. Set DEEPSEEK_API_KEY or pass --api-key."
    )


def test_transport_error_reported(project: Path, monkeypatch) -> None:
    def failing(prompt, config):
        raise AnalysisRequestError("API request failed: Bad Gateway")

    monkeypatch.setattr(service, "request_analysis", failing)

    result = run_analysis(project, AnalysisConfig(api_key="k"))

    assert result.error == "Analysis failed: API request failed: Bad Gateway"
    assert result.html_path is None


def test_unparseable_reply_still_succeeds(project: Path, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(service, "request_analysis", lambda prompt, config: "I could not analyze this.")

    result = run_analysis(project, AnalysisConfig(api_key="k"), output_path=tmp_path / "r.html")

    assert result.error is None
    assert result.record.project_name == ""
    assert result.record.tech_stack == ()


def test_ollama_transport_error_reported(project: Path, monkeypatch) -> None:
    class DisconnectingClient:
        def __init__(self, host=None, timeout=None):
            pass

        def chat(self, model, messages, options=None):
            raise httpx.RemoteProtocolError("Server disconnected without sending a response.")

    monkeypatch.setattr(client, "Client", DisconnectingClient)

    result = run_analysis(project, AnalysisConfig(provider="ollama", ollama_host="http://127.0.0.1:9"), render=False)

    assert result.record is None
    assert result.error == "Analysis failed: API request failed: Server disconnected without sending a response."
