from app.mappers.message_template import build_followup_query, build_message_template


def test_template_contains_all_fields():
    msg = build_message_template("Nopa", "https://yelp.com/biz/nopa", "7pm", "window seat")
    assert msg.startswith("Hi Nopa team,")
    assert "Preferred time: 7pm" in msg
    assert "Notes: window seat" in msg
    assert "Yelp link: https://yelp.com/biz/nopa" in msg


def test_template_defaults_for_blank_values():
    msg = build_message_template("Nopa", "https://yelp.com/biz/nopa", "  ", None)
    assert "Preferred time: flexible" in msg
    assert "Notes: No extra details" in msg


def test_followup_query():
    query = build_followup_query("Nopa", "https://yelp.com/biz/nopa")
    assert "Business: Nopa" in query
    assert "Preferred time: flexible" in query
    assert "Notes: none" in query
    assert "3 next steps" in query
