"""
Reply generation for the AI tutor and the tutorial summary builder.

generate_reply() asks OpenAI when a key is configured and falls back to a
canned, context-specific answer on any failure. build_tutorial_summary()
never calls a model: it derives the summary from the tutorial's own text.
"""
import logging
import re
from typing import List, Optional

import openai

from app.ai.openai_client import get_client, set_last_error
from app.core.config import OPENAI_MODEL

logger = logging.getLogger(__name__)

FALLBACK_PREFIX = "I understand you want to learn more about this topic. "
FALLBACK_BY_CONTEXT = {
    "tutorial": (
        "Based on the tutorial content, here are some key insights and explanations "
        "that might help you understand better."
    ),
    "project": (
        "For this project, I can help you with implementation details, best practices, "
        "and troubleshooting common issues."
    ),
    "general": (
        "I'm here to help with your coding questions and learning journey. "
        "Feel free to ask about any programming concepts!"
    ),
}

SYSTEM_PROMPT = (
    "You are the ThinkHub tutor, a patient senior engineer helping learners. "
    "Answer in at most 150 words. Prefer explanation over full solutions."
)

DEFAULT_KEY_POINTS = [
    "Understanding the core concepts and fundamentals",
    "Practical implementation with real-world examples",
    "Best practices and common pitfalls to avoid",
    "Advanced techniques and optimization strategies",
    "Testing and debugging approaches",
]
MAX_KEY_POINTS = 5

_HEADING = re.compile(r"^\s{0,3}#{1,6}\s+(.+?)\s*#*\s*$", re.MULTILINE)
_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")


def fallback_reply(context_type: Optional[str]) -> str:
    return FALLBACK_PREFIX + FALLBACK_BY_CONTEXT.get(context_type or "general", FALLBACK_BY_CONTEXT["general"])


def _context_hint(context_type: Optional[str], context_title: Optional[str]) -> str:
    if context_type in ("tutorial", "project") and context_title:
        return f"The learner is working on the {context_type} \"{context_title}\"."
    return "The learner is asking a general programming question."


def generate_reply(message: str, context_type: Optional[str] = None, context_title: Optional[str] = None) -> str:
    client = get_client()
    if client is None:
        return fallback_reply(context_type)

    try:
        completion = client.chat.completions.create(
            model=OPENAI_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT + " " + _context_hint(context_type, context_title)},
                {"role": "user", "content": message},
            ],
            max_tokens=300,
            temperature=0.4,
        )
        reply = (completion.choices[0].message.content or "").strip()
    except openai.OpenAIError as e:
        set_last_error(f"{type(e).__name__}: {e}")
        logger.error("[AI] OpenAI call failed: %s", e)
        return fallback_reply(context_type)

    if not reply:
        logger.warning("[AI] OpenAI returned an empty reply")
        return fallback_reply(context_type)
    return reply


def _key_points(content: str) -> List[str]:
    headings = [h.strip() for h in _HEADING.findall(content) if h.strip()]
    seen = []
    for h in headings:
        if h not in seen:
            seen.append(h)
    return seen[:MAX_KEY_POINTS] or list(DEFAULT_KEY_POINTS)


def build_tutorial_summary(title: str, description: str, content: str) -> dict:
    """Summary from the description's first two sentences; key points from the content's headings."""
    sentences = [s for s in _SENTENCE_END.split(description.strip()) if s]
    lead = " ".join(sentences[:2]) if sentences else description.strip()
    summary = f"{title}: {lead}"
    return {"summary": summary, "keyPoints": _key_points(content)}
