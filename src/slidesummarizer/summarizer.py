# summarization providers: turn source text into a summary bundle
import json
import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional

from .config import TEXT_LIMIT, SHORT_TEXT_FALLBACK, Settings, get_settings
from .exceptions import SummarizationError
from .llm_service import OllamaLLMService
from .models import SummaryBundle

logger = logging.getLogger(__name__)

SENTENCE_SPLIT = re.compile(r"(?<=[.!?])")
LEADING_BULLET = re.compile(r"^[•\-–]")
SLIDE_HEADING = re.compile(r"^Slide\s*\d+\s*:?\s*(.*)$", re.IGNORECASE)
JSON_FENCE = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)

# cut points tried when condensing, with how many characters of the token to keep
BREAKPOINTS = [(". ", 1), ("! ", 1), ("? ", 1), ("; ", 0), (", ", 0), (" ", 0)]


# split text into trimmed sentences ending at . ! or ?
def clean_sentences(text: str) -> List[str]:
    collapsed = re.sub(r"\s+", " ", text)
    return [chunk.strip() for chunk in SENTENCE_SPLIT.split(collapsed) if chunk.strip()]


# shorten a sentence or paragraph to the limit at the nicest break point
def condense(text: str, limit: int = TEXT_LIMIT) -> str:
    """Strip a leading bullet, collapse whitespace and cut to the limit"""
    cleaned = re.sub(r"\s+", " ", LEADING_BULLET.sub("", text)).strip()
    if len(cleaned) <= limit:
        return cleaned

    window = cleaned[:limit]
    cut_index = -1
    for token, kept in BREAKPOINTS:
        index = window.rfind(token)
        if index > limit * 0.4 and index + kept > cut_index:
            cut_index = index + kept
    return window[:cut_index if cut_index > 0 else limit].strip()


# read "Slide 1: ..." style listings into one string per slide
def parse_slide_structure(content: str, limit: int = TEXT_LIMIT) -> List[str]:
    lines = [line.strip() for line in content.splitlines() if line.strip()]
    slides = []
    buffer: List[str] = []
    collecting = False

    def push_buffer():
        if buffer:
            text = re.sub(r"\s+", " ", " ".join(buffer)).strip()
            slides.append(text[:limit].strip())
            buffer.clear()

    for line in lines:
        match = SLIDE_HEADING.match(line)
        if match:
            push_buffer()
            collecting = True
            if match.group(1).strip():
                buffer.append(match.group(1).strip())
        elif collecting:
            buffer.append(line)
    push_buffer()

    return [slide for slide in slides if slide]


# read a json reply ({headline|summary, keyIdeas|key_ideas}) into a bundle
def parse_json_bundle(content: str, slide_count: int) -> Optional[SummaryBundle]:
    fenced = JSON_FENCE.search(content)
    raw = fenced.group(1) if fenced else content
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None

    headline = data.get("headline", data.get("summary", ""))
    key_ideas = data.get("keyIdeas", data.get("key_ideas", []))
    if not isinstance(headline, str):
        headline = ""
    if not isinstance(key_ideas, list):
        return None
    key_ideas = [idea for idea in key_ideas if isinstance(idea, str) and idea.strip()]
    if not key_ideas:
        return None
    return SummaryBundle(headline=headline, key_ideas=key_ideas[:slide_count], bullets=[])


class SummaryProvider(ABC):
    """Produces a summary bundle whose key ideas are ranked by importance"""

    @abstractmethod
    def summarize(self, text: str, slide_count: int) -> SummaryBundle:
        pass


# deterministic sentence-based summarizer, needs no model
class LocalSummaryProvider(SummaryProvider):
    def __init__(self, limit: int = TEXT_LIMIT):
        self.limit = limit

    def summarize(self, text: str, slide_count: int) -> SummaryBundle:
        """Use the opening sentences as headline and the following ones as key ideas"""
        if not text.strip():
            return SummaryBundle()

        sentences = clean_sentences(text)
        paragraphs = [item.strip() for item in re.split(r"\n+", text) if item.strip()]

        headline = condense(" ".join(sentences[:2]), self.limit)
        key_ideas = [condense(sentence, self.limit) for sentence in sentences[2:2 + slide_count * 2]]
        key_ideas = [idea for idea in key_ideas if idea][:slide_count]

        if not headline:
            fallback = paragraphs[0] if paragraphs else SHORT_TEXT_FALLBACK
            headline = condense(fallback, self.limit)
        if not key_ideas:
            key_ideas = [condense(item, self.limit) for item in paragraphs[:slide_count]]

        logger.info(f"✓ Local summary: {len(key_ideas)} key ideas from {len(sentences)} sentences")
        return SummaryBundle(headline=headline, key_ideas=key_ideas, bullets=[])


# summarizer backed by a local ollama model, falling back to the local provider
class OllamaSummaryProvider(SummaryProvider):
    def __init__(self, llm_service: Optional[OllamaLLMService] = None, limit: int = TEXT_LIMIT,
                 fallback: Optional[SummaryProvider] = None):
        self.llm_service = llm_service or OllamaLLMService()
        self.limit = limit
        self.fallback = fallback or LocalSummaryProvider(limit)

    # build the chat messages sent to the model
    def _build_messages(self, text: str, slide_count: int) -> List[dict]:
        return [
            {
                "role": "system",
                "content": (
                    "You write Instagram carousels. Answer only with JSON: "
                    '{"headline": string, "keyIdeas": string[]}.'
                ),
            },
            {
                "role": "user",
                "content": (
                    f"Rewrite the text as {slide_count} slides, one strong idea per slide, "
                    f"each under {self.limit} characters. Only facts from the text.\n\n"
                    f'Text:\n"""{text}"""'
                ),
            },
        ]

    def summarize(self, text: str, slide_count: int) -> SummaryBundle:
        """Ask the model for a bundle; use the local provider if that fails"""
        if not text.strip():
            return SummaryBundle()

        try:
            content = self.llm_service.generate_chat_completion(
                self._build_messages(text, slide_count), json_mode=True
            )
        except SummarizationError as e:
            logger.error(f"✗ Ollama summarization failed, using local summary: {str(e)}")
            return self.fallback.summarize(text, slide_count)

        bundle = parse_json_bundle(content, slide_count)
        if bundle:
            logger.info(f"✓ Ollama summary: {len(bundle.key_ideas)} key ideas")
            return bundle

        slides = parse_slide_structure(content, self.limit)[:slide_count]
        if slides:
            logger.info(f"✓ Ollama summary (slide listing): {len(slides)} key ideas")
            return SummaryBundle(headline=slides[0], key_ideas=slides, bullets=[])

        logger.warning("Could not read the model reply, using local summary")
        return self.fallback.summarize(text, slide_count)


# pick the provider named in settings (or explicitly)
def get_summary_provider(settings: Optional[Settings] = None, name: Optional[str] = None) -> SummaryProvider:
    """Get the summarization provider for the given settings"""
    settings = settings or get_settings()
    name = (name or settings.provider).lower()
    if name == "ollama":
        return OllamaSummaryProvider(OllamaLLMService(settings.ollama_base_url, settings.ollama_model))
    if name != "local":
        logger.warning(f"Unknown summarization provider '{name}', using local")
    return LocalSummaryProvider()
