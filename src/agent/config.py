"""Agent configuration with environment variable loading.

Pydantic-based configuration for the agno analysis agent.
Supports Google Gemini (default) and OpenAI models.
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODELS = {
    "gemini": "gemini-2.0-flash",
    "openai": "gpt-4o-mini",
}


def _default_api_key() -> str:
    return (
        os.getenv("LLM_API_KEY")
        or os.getenv("GOOGLE_API_KEY")
        or os.getenv("OPENAI_API_KEY", "")
    )


class AgentConfig(BaseModel):
    """Configuration for the agno analysis agent.

    Attributes:
        provider: Model provider, "gemini" or "openai".
        api_key: API key for model access.
        model_name: Model identifier to use. Falls back to the provider default.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
    """

    # Values read from the environment go through the validators too
    model_config = ConfigDict(validate_default=True)

    provider: Literal["gemini", "openai"] = Field(
        default_factory=lambda: os.getenv("LLM_PROVIDER", "gemini").lower(),
        description="Model provider",
    )
    api_key: str = Field(
        default_factory=_default_api_key,
        description="API key for LLM provider",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", ""),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.4,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default=2048,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set LLM_API_KEY, GOOGLE_API_KEY or OPENAI_API_KEY in .env"
            )
        return v.strip()

    @property
    def resolved_model_name(self) -> str:
        """Configured model, or the provider's default when unset."""
        return self.model_name.strip() or DEFAULT_MODELS[self.provider]


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return AgentConfig()
