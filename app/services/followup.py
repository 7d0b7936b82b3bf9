import logging

from app.exceptions.custom import RateLimitError, YelpAIError
from app.mappers.business_extractor import extract_reply
from app.mappers.message_template import (
    AI_NEXT_STEPS,
    FALLBACK_NEXT_STEPS,
    FALLBACK_QUESTIONS,
    build_followup_query,
    build_message_template,
)
from app.mappers.quickfind import why_we_ask
from app.schemas.responses import QuestionNote, QuoteResponse, UpstreamError
from app.services.yelp_ai import YelpAIService

logger = logging.getLogger(__name__)


def question_notes(questions: list[str]) -> list[QuestionNote]:
    return [QuestionNote(question=q, why=why_we_ask(q)) for q in questions]


class FollowupService:
    def __init__(self, yelp_ai: YelpAIService):
        self._yelp_ai = yelp_ai

    async def generate(
        self,
        chat_id: str,
        provider_name: str,
        provider_url: str,
        preferred_time: str | None = None,
        user_notes: str | None = None,
    ) -> QuoteResponse:
        """Ask the assistant for a next-step message; always returns something usable."""
        template = build_message_template(provider_name, provider_url, preferred_time, user_notes)
        query = build_followup_query(provider_name, provider_url, preferred_time, user_notes)

        try:
            data = await self._yelp_ai.chat(query, chat_id=chat_id)
        except (YelpAIError, RateLimitError) as exc:
            logger.warning("Follow-up generation fell back to template: %s", exc)
            return QuoteResponse(
                chat_id=chat_id,
                provider_name=provider_name,
                provider_url=provider_url,
                quote_message=template,
                questions=list(FALLBACK_QUESTIONS),
                question_notes=question_notes(FALLBACK_QUESTIONS),
                next_steps=list(FALLBACK_NEXT_STEPS),
                yelp_error=UpstreamError(
                    status=getattr(exc, "status_code", 429),
                    raw=getattr(exc, "raw", None) or str(exc),
                ),
            )

        reply = extract_reply(data)
        return QuoteResponse(
            chat_id=reply.chat_id or chat_id,
            provider_name=provider_name,
            provider_url=provider_url,
            quote_message=reply.text or template,
            questions=[],
            next_steps=list(AI_NEXT_STEPS),
            ai_text=reply.text,
        )
