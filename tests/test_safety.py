"""Tests for destination safety notes."""

from trip_planner.safety import DISCLAIMER, resolve_country, resolve_safety_notes


def test_resolve_country_prefers_city_table():
    assert resolve_country("Paris") == "france"
    assert resolve_country("Old Delhi, somewhere") == "india"


def test_resolve_country_uses_last_comma_segment():
    assert resolve_country("Jaipur, Rajasthan, India") == "india"


def test_resolve_country_unknown():
    assert resolve_country("Atlantis") is None


def test_known_country_includes_helpline():
    notes = resolve_safety_notes("Jaipur, India")
    assert notes.startswith("Safety Guidelines for Jaipur, India:")
    assert "Local women's helpline: 181" in notes
    assert "Website: wcd.nic.in" in notes
    assert notes.endswith(DISCLAIMER)


def test_cultural_notes_are_added():
    notes = resolve_safety_notes("Istanbul")
    assert "Shoulder and knee coverage recommended in religious areas" in notes
    assert "Recommended areas: Istanbul Old City, Cappadocia, Coastal resorts" in notes


def test_country_without_helpline_suggests_research():
    notes = resolve_safety_notes("Lisbon, Portugal")
    assert "Research local emergency numbers" in notes


def test_solo_and_female_travelers_get_extra_guidance():
    assert "As a solo traveler" in resolve_safety_notes("Paris", "solo")
    assert "As a solo traveler" in resolve_safety_notes("Paris", "female")
    assert "As a solo traveler" not in resolve_safety_notes("Paris", "family")


def test_unknown_destination_gets_generic_guidance_only():
    notes = resolve_safety_notes("Atlantis")
    assert "Stay in well-lit, populated areas" in notes
    assert "helpline" not in notes
    assert "Research local emergency numbers" not in notes
    assert notes.endswith(DISCLAIMER)


def test_blank_destination_never_fails():
    notes = resolve_safety_notes(None, None)
    assert notes.startswith("Safety Guidelines:")
