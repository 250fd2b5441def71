"""Agno agent logic for multimodal analysis.

Answers a question about one uploaded file (image, audio, video or document).

Responsibilities:
    - Agent initialization with Gemini or OpenAI models
    - Mapping uploaded media onto agno media objects
    - Single, stateless request/response runs

Leverages the Agno framework for agent lifecycle management.
Maintains clean separation from the HTTP layer.
"""

from src.agent.analysis_agent import AgentError, AnalysisService, get_agent_service
from src.agent.config import AgentConfig, get_agent_config

__all__ = [
    "AgentConfig",
    "AgentError",
    "AnalysisService",
    "get_agent_config",
    "get_agent_service",
]
