# llm service using ollama for summarization
import requests
import logging
from typing import List, Dict, Optional

from .exceptions import SummarizationError

logger = logging.getLogger(__name__)


# service for interacting with ollama llm api
class OllamaLLMService:
    """LLM service backed by a local Ollama server"""

    # keep connection details; the server is only contacted on first use
    def __init__(self, base_url: str = "http://localhost:11434", model: str = "llama3",
                 session: Optional[requests.Session] = None, timeout: float = 120):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()
        self._available = False

    # verify ollama server is running and model is available
    def ensure_available(self):
        """Check if Ollama is running and the model is pulled"""
        if self._available:
            return
        try:
            # check if ollama server is responding
            response = self.session.get(f"{self.base_url}/api/tags", timeout=5)
            if response.status_code != 200:
                raise SummarizationError("Ollama is not running. Please start it with: ollama serve")

            # check if the requested model is installed
            models = response.json().get("models", [])
            model_names = [model["name"] for model in models]

            if not any(self.model in name for name in model_names):
                logger.warning(f"Model {self.model} not found. Available models: {model_names}")
                raise SummarizationError(f"Model {self.model} not available. Run: ollama pull {self.model}")

            logger.info(f"✓ Ollama is running with model: {self.model}")
            self._available = True

        except requests.exceptions.ConnectionError as e:
            raise SummarizationError(
                "Cannot connect to Ollama. Please install and start it:\n"
                "1. Install Ollama: https://ollama.ai/\n"
                "2. Start Ollama: ollama serve\n"
                f"3. Pull model: ollama pull {self.model}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise SummarizationError(f"Ollama availability check failed: {str(e)}") from e
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # malformed /api/tags reply
            raise SummarizationError(f"Unexpected reply from Ollama /api/tags: {str(e)}") from e

    # generate text using ollama api
    def generate_text(self, prompt: str, max_tokens: int = 1000, temperature: float = 0.4,
                      json_mode: bool = False) -> str:
        """Generate text using Ollama"""
        self.ensure_available()

        # prepare request payload
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": temperature,
                "num_predict": max_tokens,
                "top_p": 0.9,
                "top_k": 40
            }
        }
        if json_mode:
            payload["format"] = "json"

        try:
            response = self.session.post(
                f"{self.base_url}/api/generate",
                json=payload,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            raise SummarizationError("Request timed out. The model might be too slow or overloaded.") from e
        except requests.exceptions.RequestException as e:
            raise SummarizationError(f"Ollama request failed: {str(e)}") from e

        if response.status_code != 200:
            raise SummarizationError(f"Ollama API error: {response.status_code} - {response.text}")

        # extract generated text from response
        try:
            result = response.json()
            return result.get("response", "").strip()
        except (ValueError, TypeError, AttributeError) as e:
            raise SummarizationError(f"Unexpected reply from Ollama /api/generate: {str(e)}") from e

    # generate chat completion from message history
    def generate_chat_completion(self, messages: List[Dict[str, str]], max_tokens: int = 1000,
                                 temperature: float = 0.4, json_mode: bool = False) -> str:
        """Generate chat completion using Ollama"""
        prompt = self._messages_to_prompt(messages)
        return self.generate_text(prompt, max_tokens, temperature, json_mode=json_mode)

    # convert list of messages to a single prompt string
    def _messages_to_prompt(self, messages: List[Dict[str, str]]) -> str:
        """Convert chat messages to a single prompt"""
        prompt_parts = []

        # format each message by role
        for message in messages:
            role = message.get("role", "user")
            content = message.get("content", "")

            if role == "system":
                prompt_parts.append(f"System: {content}")
            elif role == "user":
                prompt_parts.append(f"User: {content}")
            elif role == "assistant":
                prompt_parts.append(f"Assistant: {content}")

        # join messages and add assistant prompt
        return "\n\n".join(prompt_parts) + "\n\nAssistant:"

    # test if ollama connection is working
    def test_connection(self) -> bool:
        """Test if the LLM service is working"""
        try:
            response = self.generate_text("Reply with just 'OK'.", max_tokens=10)
            logger.info(f"✓ LLM test successful. Response: {response}")
            return True
        except SummarizationError as e:
            logger.error(f"✗ LLM test failed: {str(e)}")
            return False
