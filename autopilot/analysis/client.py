"""
Send the analysis prompt to a chat-completion service and return the reply text.
Supports DeepSeek's HTTP API (default) and a local Ollama daemon.
One request per call; failures are raised, never retried.
"""

import logging

import httpx
import requests
from ollama import Client, ResponseError

from autopilot.errors import AnalysisRequestError, ConfigurationError
from .config import AnalysisConfig, PROVIDERS

logger = logging.getLogger(__name__)


def request_analysis(prompt: str, config: AnalysisConfig) -> str:
    """
    Call the configured provider with a single user message.
    Raises ConfigurationError before any network call if the config is unusable.
    """
    if config.provider not in PROVIDERS:
        raise ConfigurationError(
            f"Unknown provider '{config.provider}'. Choose one of: {', '.join(PROVIDERS)}"
        )
    if config.provider == "ollama":
        return _request_ollama(prompt, config)
    return _request_deepseek(prompt, config)


def _request_deepseek(prompt: str, config: AnalysisConfig) -> str:
    if not config.api_key:
        raise ConfigurationError(
            "DeepSeek API key not configured. Set DEEPSEEK_API_KEY or pass --api-key."
        )
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {config.api_key}",
    }
    payload = {
        "model": config.model,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": config.temperature,
    }
    logger.info("POST %s (model=%s, prompt=%d chars)", config.endpoint, config.model, len(prompt))
    try:
        response = requests.post(config.endpoint, json=payload, headers=headers, timeout=config.timeout)
    except requests.RequestException as e:
        raise AnalysisRequestError(f"API request failed: {e}") from e

    if not response.ok:
        logger.debug("Error body from API: %s", response.text[:500])
        status = response.reason or str(response.status_code)
        raise AnalysisRequestError(f"API request failed: {status}")

    try:
        data = response.json()
    except ValueError as e:
        raise AnalysisRequestError(f"Unexpected API response: {e}") from e
    return _extract_content(data)


def _extract_content(data: dict) -> str:
    """Reply text from the first completion choice."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        if isinstance(data, dict) and "error" in data:
            raise AnalysisRequestError(f"API request failed: {data['error']}")
        raise AnalysisRequestError(f"Unexpected API response: {str(data)[:200]}")
    if content is None:
        return ""
    if not isinstance(content, str):
        raise AnalysisRequestError(f"Unexpected API response: {str(content)[:200]}")
    return content


def _request_ollama(prompt: str, config: AnalysisConfig) -> str:
    messages = [{"role": "user", "content": prompt}]
    options = {"temperature": config.temperature}
    logger.info("Ollama chat (model=%s, host=%s)", config.model, config.ollama_host or "default")
    # host=None means the client's default host
    client = Client(host=config.ollama_host, timeout=config.timeout)
    try:
        response = client.chat(model=config.model, messages=messages, options=options)
    except ResponseError as e:
        raise AnalysisRequestError(f"API request failed: {e.error}") from e
    except (ConnectionError, httpx.HTTPError) as e:
        raise AnalysisRequestError(f"API request failed: {e}") from e
    return (response.get("message") or {}).get("content") or ""
