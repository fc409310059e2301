"""Advisory safety notes for a destination.

Guidance is assembled from static tables: a city to country map, official
helpline records per country, cultural notes for a few countries, and generic
guidelines that apply everywhere. The text is factual and non-alarmist and
the resolver never fails; unknown places get the generic guidance only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Helpline:
    number: str
    service_name: str
    website: str
    notes: str


@dataclass(frozen=True)
class CulturalNotes:
    dress: str
    areas: Tuple[str, ...]
    note: str


CITY_COUNTRIES: Mapping[str, str] = MappingProxyType(
    {
        "paris": "france",
        "london": "united kingdom",
        "new york": "united states",
        "los angeles": "united states",
        "toronto": "canada",
        "sydney": "australia",
        "melbourne": "australia",
        "mumbai": "india",
        "delhi": "india",
        "berlin": "germany",
        "munich": "germany",
        "rio de janeiro": "brazil",
        "sao paulo": "brazil",
        "cairo": "egypt",
        "istanbul": "turkey",
        "marrakech": "morocco",
        "casablanca": "morocco",
    }
)

HELPLINES: Mapping[str, Helpline] = MappingProxyType(
    {
        "united states": Helpline(
            "1-800-799-7233", "National Domestic Violence Hotline", "thehotline.org",
            "Available 24/7, multilingual support",
        ),
        "united kingdom": Helpline(
            "0808 2000 247", "National Domestic Abuse Helpline", "womensaid.org.uk",
            "24/7 service, free and confidential",
        ),
        "canada": Helpline(
            "1-866-293-4483", "Assaulted Women's Helpline", "awhl.org",
            "24/7 crisis support line",
        ),
        "australia": Helpline(
            "1800 737 732",
            "National Sexual Assault, Family & Domestic Violence Counselling Line",
            "1800respect.org.au",
            "24/7 service, available in multiple languages",
        ),
        "india": Helpline(
            "181", "Women Helpline (Ministry of Women & Child Development)", "wcd.nic.in",
            "24/7 service, police assistance",
        ),
        "france": Helpline(
            "3919", "National Helpline for Women Victims of Violence", "arcs-info.org",
            "Free service, available 24/7",
        ),
        "germany": Helpline(
            "08000 116 016", "National Domestic Violence Hotline", "hilfetelefon.de",
            "Free, anonymous, 24/7 support",
        ),
        "brazil": Helpline(
            "180", "National Women's Helpline", "gov.br/mdh",
            "24/7 service, government-run",
        ),
    }
)

CULTURAL_NOTES: Mapping[str, CulturalNotes] = MappingProxyType(
    {
        "egypt": CulturalNotes(
            "Modest clothing recommended, especially in religious sites",
            ("Downtown Cairo", "Giza", "Alexandria"),
            "Generally safe for women in tourist areas with standard precautions",
        ),
        "turkey": CulturalNotes(
            "Shoulder and knee coverage recommended in religious areas",
            ("Istanbul Old City", "Cappadocia", "Coastal resorts"),
            "Tourist destinations are generally safe with normal precautions",
        ),
        "morocco": CulturalNotes(
            "Modest dress advised, particularly outside major tourist areas",
            ("Marrakech medina", "Casablanca", "Coastal cities"),
            "Well-established tourist infrastructure with standard safety measures",
        ),
    }
)

URBAN_GUIDELINES = (
    "Stay in well-lit, populated areas, especially after dark",
    "Use reputable transportation services with licensed drivers",
    "Keep emergency contacts easily accessible",
    "Share your daily itinerary with trusted contacts",
    "Research neighborhoods in advance using official tourism resources",
    "Trust your instincts - if something feels wrong, remove yourself from the situation",
)

ACCOMMODATION_GUIDELINES = (
    "Choose accommodations in central, well-reviewed locations",
    "Verify 24/7 front desk service and security measures",
    "Check reviews that mention safety for solo and female travelers",
    "Ensure good lighting around entrances and common areas",
    "Confirm secure room locks and safe storage options",
)

TRANSPORT_GUIDELINES = (
    "Use official taxis or ride-sharing services with verified drivers",
    "Avoid unmarked or unofficial transportation",
    "Keep copies of important documents in secure locations",
    "Stay alert during transit, especially at night",
    "Have backup transportation plans for emergencies",
)

SOLO_GUIDELINES = (
    "As a solo traveler, consider joining group activities or tours for added security",
    "Stay in accommodations with 24/7 reception and good reviews from other solo travelers",
    "Regular check-ins with family/friends are recommended",
)

SOLO_TRAVEL_TYPES = frozenset({"solo", "female"})

DISCLAIMER = (
    "Note: These are general safety guidelines. Local conditions may vary. "
    "Always verify current information through official sources before travel."
)


def resolve_country(destination: str) -> Optional[str]:
    """Guess the country for a destination string.

    Known city names are matched as substrings first; otherwise a
    ``City, Country`` style string yields its last comma-separated part.
    """

    lowered = destination.lower()
    for city, country in CITY_COUNTRIES.items():
        if city in lowered:
            return country
    parts = [part.strip().lower() for part in destination.split(",")]
    if len(parts) > 1 and parts[-1]:
        return parts[-1]
    return None


def _country_guidance(country: str) -> List[str]:
    lines: List[str] = []
    cultural = CULTURAL_NOTES.get(country)
    if cultural:
        lines.append(cultural.dress)
        lines.append(f"Recommended areas: {', '.join(cultural.areas)}")
        lines.append(cultural.note)

    helpline = HELPLINES.get(country)
    if helpline:
        lines.append(f"Local women's helpline: {helpline.number} ({helpline.service_name})")
        lines.append(f"Website: {helpline.website}")
        lines.append(helpline.notes)
    else:
        lines.append("Research local emergency numbers and women's support services before travel")
    return lines


def resolve_safety_notes(destination: Optional[str], travel_type: Optional[str] = "general") -> str:
    destination = (destination or "").strip()
    country = resolve_country(destination) if destination else None

    recommendations = [*URBAN_GUIDELINES, *ACCOMMODATION_GUIDELINES, *TRANSPORT_GUIDELINES]
    if country:
        recommendations.extend(_country_guidance(country))
    if travel_type in SOLO_TRAVEL_TYPES:
        recommendations.extend(SOLO_GUIDELINES)

    heading = f"Safety Guidelines for {destination}:" if destination else "Safety Guidelines:"
    lines = [heading, ""]
    lines.extend(f"{index}. {item}" for index, item in enumerate(recommendations, start=1))
    lines.append("")
    lines.append(DISCLAIMER)
    return "\n".join(lines)
