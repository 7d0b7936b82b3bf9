FALLBACK_QUESTIONS = [
    "How many guests?",
    "Any dietary preferences (veg/vegan/allergies)?",
    "Is a different time (±2 hours) acceptable?",
]

FALLBACK_NEXT_STEPS = [
    "Try a nearby time window (±2 hours).",
    "Call the restaurant if it's for tonight or a large party.",
    "If you want, I can suggest 3 similar alternatives nearby.",
]

AI_NEXT_STEPS = [
    "If the time is unavailable, try ±2 hours.",
    "If it's a party of 6+, call directly for best results.",
    "Confirm dietary needs and seating preference (quiet/booth/outdoor).",
]


def _clean(value: str | None, default: str) -> str:
    return value.strip() if value and value.strip() else default


def build_message_template(
    provider_name: str,
    provider_url: str,
    preferred_time: str | None = None,
    user_notes: str | None = None,
) -> str:
    """Copy/paste reservation request used when the assistant can't write one."""
    return (
        f"Hi {provider_name} team,\n\n"
        "I'd like to reserve a table / confirm availability.\n"
        f"Preferred time: {_clean(preferred_time, 'flexible')}\n"
        f"Notes: {_clean(user_notes, 'No extra details')}\n\n"
        f"Yelp link: {provider_url}\n\n"
        "Thanks!"
    )


def build_followup_query(
    provider_name: str,
    provider_url: str,
    preferred_time: str | None = None,
    user_notes: str | None = None,
) -> str:
    # Kept short: the chat endpoint rejects long queries.
    return (
        "Help the user take the next action for this business.\n"
        f"Business: {provider_name}\n"
        f"Link: {provider_url}\n"
        f"Preferred time: {_clean(preferred_time, 'flexible')}\n"
        f"Notes: {_clean(user_notes, 'none')}\n\n"
        "Return:\n"
        "1) a short message the user can copy/paste\n"
        "2) up to 3 quick questions if needed\n"
        "3) 3 next steps"
    )
