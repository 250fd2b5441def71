"""Agno agent service for single-shot multimodal analysis.

Core module for turning a prompt plus one media file into a markdown answer.

Architecture Decisions:

1. **Stateless runs** - Every analysis is independent. No session storage,
   no history, no knowledge base: the whole context is the prompt and the
   attached file.

2. **Singleton Pattern** - Agent initialization (model client construction)
   is done once and reused across requests.

3. **Service Wrapper** - Decouples the API from agno's interface and maps
   media types onto agno's media classes in one place.

4. **Errors propagate** - Model failures are raised as AgentError so the
   HTTP layer can report them; nothing is turned into answer text.
"""

import logging

from agno.agent import Agent
from agno.media import Audio, File, Image, Video
from agno.models.google import Gemini
from agno.models.openai import OpenAIChat

from src.agent.config import AgentConfig, get_agent_config

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "A nutrition assistant that reads food labels, ingredient lists, "
    "menus and meal photos and answers questions about them."
)

INSTRUCTIONS = [
    "Answer the user's question using the attached file.",
    "Point out notable ingredients, additives, allergens and nutrients.",
    "Say so plainly when the file does not contain enough information.",
    "You are not a doctor; suggest professional advice for medical conditions.",
    "Be concise yet thorough.",
]


class AgentError(Exception):
    """Raised when the model call fails."""

    pass


class AnalysisService:
    """Service for running the agno analysis agent.

    Wraps agno's Agent with:
    - Provider selection (Gemini or OpenAI)
    - Media type to agno media mapping
    - Singleton lifecycle management
    - Centralized error handling
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the analysis service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._agent = self._create_agent()

    def _create_model(self) -> Gemini | OpenAIChat:
        """Create the model client for the configured provider."""
        model_name = self._config.resolved_model_name

        if self._config.provider == "openai":
            return OpenAIChat(
                id=model_name,
                api_key=self._config.api_key,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
            )

        return Gemini(
            id=model_name,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
            max_output_tokens=self._config.max_tokens,
        )

    def _create_agent(self) -> Agent:
        """Create the agno agent instance.

        Returns:
            Configured Agent with markdown output and no persistence.
        """
        return Agent(
            model=self._create_model(),
            description=DESCRIPTION,
            instructions=INSTRUCTIONS,
            # Output as markdown for rich formatting in UI
            markdown=True,
        )

    @staticmethod
    def _media_kwargs(content: bytes, media_type: str) -> dict[str, list]:
        """Build the agno media argument for one file.

        Args:
            content: Raw file bytes.
            media_type: MIME type of the file.

        Returns:
            Keyword arguments for Agent.arun (images, audio, videos or files).
        """
        major, _, minor = media_type.partition("/")
        minor = minor.removeprefix("x-")

        if major == "image":
            return {"images": [Image(content=content, mime_type=media_type)]}
        if major == "audio":
            return {"audio": [Audio(content=content, format=minor, mime_type=media_type)]}
        if major == "video":
            return {"videos": [Video(content=content, format=minor, mime_type=media_type)]}
        return {"files": [File(content=content, mime_type=media_type)]}

    async def analyze(self, prompt: str, content: bytes, media_type: str) -> str:
        """Get a complete answer about one file.

        Args:
            prompt: The user's question.
            content: Raw bytes of the attached file.
            media_type: MIME type of the attached file.

        Returns:
            Complete response text, empty when the model returned nothing.

        Raises:
            AgentError: If the model call fails.
        """
        try:
            response = await self._agent.arun(
                prompt,
                **self._media_kwargs(content, media_type),
            )
        except Exception as e:
            logger.error(f"Model call failed ({self._config.provider}): {e}")
            raise AgentError(str(e)) from e

        logger.info(f"Analysis complete for {media_type} ({len(content)} bytes)")
        return response.content or ""


# Module-level singleton instance
_analysis_service: AnalysisService | None = None


def get_agent_service() -> AnalysisService:
    """Get or create the global analysis service.

    Uses singleton pattern for resource efficiency.

    Returns:
        The AnalysisService instance.
    """
    global _analysis_service
    if _analysis_service is None:
        _analysis_service = AnalysisService()
    return _analysis_service
