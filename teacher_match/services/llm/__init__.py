from teacher_match.services.llm.client import GatewayLLMClient, LLMClientError
from teacher_match.services.llm.factory import get_llm_client
from teacher_match.services.llm.openai_client import OpenAILLMClient

__all__ = ["GatewayLLMClient", "OpenAILLMClient", "LLMClientError", "get_llm_client"]
