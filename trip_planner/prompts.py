"""Prompt construction for the travel plan model call."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from .catalog import BUDGET_SPLIT
from .models import NormalizedInput
from .utils import format_amount, percent_of


SYSTEM_PROMPT = (
    "You are an expert travel planner AI assistant. Generate detailed, realistic "
    "travel plans based on user inputs. Provide practical advice and realistic "
    "timelines. Respond with a single JSON object only."
)


def budget_allocation(normalized: NormalizedInput) -> Dict[str, int]:
    return {share.category: percent_of(normalized.budget, share.percent) for share in BUDGET_SPLIT}


def _plan_template(normalized: NormalizedInput, currency: str) -> Dict[str, Any]:
    allocation = budget_allocation(normalized)
    return {
        "tripOverview": {
            "destination": normalized.full_destination,
            "duration": normalized.duration,
            "startDate": normalized.start_date,
            "endDate": normalized.end_date,
            "travelStyle": normalized.travel_style,
            "travelType": normalized.travel_type,
            "totalBudget": normalized.budget,
            "currency": currency,
        },
        "budgetBreakdown": {
            share.category: {
                "amount": allocation[share.category],
                "description": share.describe(normalized.duration),
            }
            for share in BUDGET_SPLIT
        },
        "dailyItinerary": [
            {
                "day": 1,
                "date": normalized.start_date,
                "activities": [
                    "Morning (9:00-12:00): [Attraction name] - [Area], entry fee [amount], travel time [X mins]",
                    "Afternoon (12:30-15:30): [Attraction name] - [Area], entry fee [amount], travel time [X mins]",
                    "Evening (17:00-19:00): [Attraction name] - [Area], entry fee [amount], travel time [X mins]",
                ],
                "meals": [
                    "BREAKFAST OPTIONS:",
                    "1. [Restaurant] - [Cuisine] ([amount] per person) [Google Maps link]",
                    "LUNCH OPTIONS:",
                    "1. [Restaurant] - [Cuisine] ([amount] per person) [Google Maps link]",
                    "DINNER OPTIONS:",
                    "1. [Restaurant] - [Cuisine] ([amount] per person) [Google Maps link]",
                ],
                "accommodation": "[Budget / Mid-range / Premium options with nightly price and Google Maps link]",
                "transport": "Morning: [Mode] ([amount], [X] mins) | Afternoon: [Mode] ([amount], [X] mins)",
                "notes": "[Practical tips: opening hours, what to carry, crowd timing]",
            }
        ],
        "safetyNotes": f"[Safety, etiquette and emergency information for {normalized.full_destination}]",
    }


def _instruction_blocks(normalized: NormalizedInput, currency: str) -> List[List[str]]:
    allocation = budget_allocation(normalized)
    budget_lines = [
        f"   - {share.category.upper()}: {allocation[share.category]} {currency} ({share.percent}%)"
        for share in BUDGET_SPLIT
    ]
    cap = normalized.style_config.activities_per_day
    return [
        [
            "1. LOCATION CLUSTERING:",
            "   - Group each day's stops by neighbourhood to minimise back-tracking",
            "   - Include distances (km) and travel times (minutes) between stops",
        ],
        [
            "2. NAMED ATTRACTIONS:",
            "   - Use real, specific attraction names, never generic placeholders",
            "   - Include entry fees, opening hours and the best time to visit",
        ],
        [
            "3. DINING OPTIONS:",
            "   - Give 3-4 breakfast, lunch and dinner options per day",
            f"   - Include cuisine type and price per person in {currency} for each option",
            "   - Include a Google Maps link for every restaurant",
        ],
        [
            "4. LOCAL TRANSPORT:",
            "   - Specify the transport mode for each transition",
            f"   - Include cost in {currency} and travel time for each segment",
            "   - Recommend local ride-hailing or transit apps where available",
        ],
        [
            "5. ACCOMMODATION TIERS:",
            "   - Suggest 3-4 stays across budget, mid-range and premium tiers",
            f"   - Include nightly price in {currency} and a Google Maps link for each",
            "   - Keep the same recommended stay for the whole trip unless asked otherwise",
        ],
        [
            f"6. BUDGET BREAKDOWN ({currency}):",
            *budget_lines,
            f"   - Amounts must not exceed the total of {format_amount(normalized.budget)} {currency}",
        ],
        [
            "7. SAFETY AND ETIQUETTE:",
            "   - Cover local customs, dress expectations and areas to avoid",
            "   - Include emergency numbers and the nearest help services",
        ],
        [
            "8. DAILY PACE:",
            f"   - At most {cap} main activities per day ({normalized.style_config.pace} pace)",
            f"   - EXACTLY {normalized.duration} days, one entry per date from "
            f"{normalized.start_date} to {normalized.end_date}",
        ],
    ]


def build_travel_prompt(normalized: NormalizedInput, currency: str = "INR") -> str:
    """Render a normalized request as a model prompt.

    The output depends only on ``normalized`` and ``currency``; identical input
    yields an identical string.
    """

    constraints = ", ".join(normalized.constraints) if normalized.constraints else "none"
    lines = [
        "Generate a comprehensive, detailed travel plan following the exact specification below.",
        "",
        f"DESTINATION: {normalized.full_destination}",
        f"CITY KEY: {normalized.destination}",
        f"TRIP DATES: {normalized.start_date} to {normalized.end_date} ({normalized.duration} days)",
        f"TOTAL BUDGET: {format_amount(normalized.budget)} {currency}",
        f"TRAVEL TYPE: {normalized.travel_type}",
        f"TRAVEL STYLE: {normalized.travel_style} - {normalized.style_config.description}",
        f"PACE: {normalized.style_config.pace}, {normalized.style_config.activities_per_day} activities per day",
        f"SPECIAL REQUIREMENTS: {constraints}",
        "",
        "MANDATORY REQUIREMENTS:",
        "",
    ]
    for block in _instruction_blocks(normalized, currency):
        lines.extend(block)
        lines.append("")

    template = json.dumps(_plan_template(normalized, currency), indent=2, ensure_ascii=False)
    lines.append("OUTPUT FORMAT (STRICT JSON, fill in every field, no extra commentary):")
    lines.append(template)
    lines.append("")
    lines.append("Return valid JSON only.")
    return "\n".join(lines)
