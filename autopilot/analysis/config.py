"""
Resolve the analysis service configuration.
Looks in: explicit overrides, environment (DEEPSEEK_API_KEY, AUTOPILOT_*),
then .env / .env.local in the project root.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEEPSEEK_ENDPOINT = "https://api.deepseek.com/v1/chat/completions"
DEFAULT_MODELS = {
    "deepseek": "deepseek-chat",
    "ollama": "llama3",
}
PROVIDERS = tuple(DEFAULT_MODELS)

API_KEY_ENV_VARS = ("DEEPSEEK_API_KEY", "AUTOPILOT_DEEPSEEK_API_KEY")


@dataclass
class AnalysisConfig:
    """Everything the service call needs. Passed in explicitly, never read from globals."""
    api_key: str = ""
    provider: str = "deepseek"
    model: str = ""
    endpoint: str = DEEPSEEK_ENDPOINT
    temperature: float = 0.7
    timeout: float = 120.0
    ollama_host: str | None = None

    def __post_init__(self):
        if not self.model:
            self.model = DEFAULT_MODELS.get(self.provider, "")

    @property
    def provider_label(self) -> str:
        return "DeepSeek AI" if self.provider == "deepseek" else f"Ollama ({self.model})"

    def __repr__(self) -> str:
        key = "***" if self.api_key else ""
        return (
            f"AnalysisConfig(provider={self.provider!r}, model={self.model!r}, "
            f"endpoint={self.endpoint!r}, api_key={key!r})"
        )


def _load_env_files(project_root: Path) -> None:
    # real environment variables win over .env files
    for name in (".env", ".env.local"):
        path = project_root / name
        if path.is_file():
            load_dotenv(path, override=False)


def get_api_key() -> str:
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


def load_config(
    project_root: str | Path | None = None,
    *,
    api_key: str | None = None,
    provider: str | None = None,
    model: str | None = None,
    endpoint: str | None = None,
    ollama_host: str | None = None,
    temperature: float | None = None,
    timeout: float | None = None,
) -> AnalysisConfig:
    """
    Build an AnalysisConfig. Explicit arguments override the environment.
    """
    root = Path(project_root) if project_root else Path.cwd()
    _load_env_files(root)
    provider = provider or os.environ.get("AUTOPILOT_PROVIDER") or "deepseek"
    config = AnalysisConfig(
        api_key=api_key if api_key is not None else get_api_key(),
        provider=provider,
        model=model or os.environ.get("AUTOPILOT_MODEL") or DEFAULT_MODELS.get(provider, ""),
        endpoint=endpoint or os.environ.get("AUTOPILOT_ENDPOINT") or DEEPSEEK_ENDPOINT,
        ollama_host=ollama_host or os.environ.get("OLLAMA_HOST") or None,
    )
    if temperature is not None:
        config.temperature = temperature
    if timeout is not None:
        config.timeout = timeout
    return config
