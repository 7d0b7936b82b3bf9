"""Pure helpers behind QuickFind: intent detection and card copy."""

from app.mappers.confidence import is_dining_provider, is_home_service_provider
from app.schemas.providers import Provider

# Checked in order; movers first so "move my couch" is not read as generic repair.
_SERVICE_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("movers", ("mover", "moving", "move my", "relocate")),
    ("plumber", ("plumb", "sink", "pipe", "drain", "toilet", "faucet", "leak")),
    ("electrician", ("electric", "wire", "outlet", "breaker")),
    ("hvac", ("hvac", " ac ", "air condition", "heat", "furnace", "thermostat")),
    ("locksmith", ("lock", "key")),
    ("cleaning service", ("clean",)),
    ("pest control", ("pest", "bug", "termite", "roach", "rat")),
    ("handyman", ("repair", "fix", "handyman", "broke")),
)


def detect_service(query: str) -> str | None:
    q = query.lower()
    for service, keywords in _SERVICE_RULES:
        if any(k in q for k in keywords):
            return service
    return None


def rewrite_query(query: str) -> str:
    """Home-service requests are simplified; dining queries pass through."""
    service = detect_service(query)
    if service:
        return f"Find {service} near me"
    return query


def pitfalls_for(provider: Provider, user_text: str) -> list[str]:
    pitfalls: list[str] = []
    dining = is_dining_provider(provider)
    home = is_home_service_provider(provider)

    if dining:
        pitfalls.append("Popular times can be fully booked - have a backup time ready.")
        pitfalls.append("'Candlelight' seating may be limited - ask for a quieter table or special seating.")
        pitfalls.append("Confirm dress code and parking to avoid last-minute stress.")
    if home:
        pitfalls.append("Get an itemized estimate before work starts (labor + parts).")
        pitfalls.append("Avoid vague 'we'll see' pricing - ask what changes the quote.")
        pitfalls.append("Confirm arrival window and whether trip/diagnostic fees apply.")
    if not dining and not home:
        pitfalls.append("Confirm hours and availability before you go.")
        pitfalls.append("Ask about any minimums, deposits, or cancellation rules.")

    text = user_text.lower()
    if "today" in text or "tonight" in text:
        pitfalls.insert(0, "Same-day needs can be tight - call directly for fastest confirmation.")
    return pitfalls[:4]


def why_we_ask(question: str) -> str:
    q = question.lower()
    if "time" in q or "when" in q:
        return "So we can check availability and reduce back-and-forth."
    if "date" in q or "another" in q:
        return "So we can find workable options if the first choice is full."
    if "guest" in q or "party" in q:
        return "Party size affects table availability and seating options."
    if "diet" in q or "allerg" in q:
        return "Ensures the restaurant can accommodate your needs."
    return "This helps us provide the most relevant suggestions."


def action_label(provider: Provider) -> str:
    if is_dining_provider(provider):
        return "Book table" if provider.accepts_reservations else "Get reservation help"
    if is_home_service_provider(provider):
        return "Request quote"
    return "Contact"


def alternatives_query(provider: Provider) -> str:
    cats = ", ".join(provider.categories[:2])
    return f"Find 3 alternatives similar to {provider.name} ({cats}) in the same area."
