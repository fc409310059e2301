"""Static lookup data used by validation, prompting and the fallback planner.

Everything here is built once at import time and exposed through read-only
containers (tuples, frozen dataclasses and ``MappingProxyType``) so request
handling can never mutate shared tables.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .models import StyleConfig


DEFAULT_TRAVEL_STYLE = "balanced"
DEFAULT_TRAVEL_TYPE = "general"
MAX_TRIP_DAYS = 30

TRAVEL_STYLES: Mapping[str, StyleConfig] = MappingProxyType(
    {
        "chill": StyleConfig(
            activities_per_day=2,
            pace="relaxed",
            description="Leisurely exploration with plenty of downtime",
        ),
        "balanced": StyleConfig(
            activities_per_day=3,
            pace="moderate",
            description="Good mix of sightseeing and relaxation",
        ),
        "fast-paced": StyleConfig(
            activities_per_day=4,
            pace="intensive",
            description="Maximize sightseeing in limited time",
        ),
    }
)

TRAVEL_TYPES: Tuple[str, ...] = (
    "solo",
    "couple",
    "family",
    "friends",
    "business",
    "general",
    "female",
)

# Labels sent by the web form, mapped to the canonical travel types above.
TRAVEL_TYPE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "General Travel": "general",
        "Solo Travel": "solo",
        "Couple Travel": "couple",
        "Family Travel": "family",
        "Friends Group": "friends",
        "Business Travel": "business",
        "Solo Female Travel": "female",
    }
)

VALID_CONSTRAINTS: Tuple[str, ...] = (
    "no flights",
    "vegetarian",
    "wheelchair accessible",
    "pet friendly",
    "budget accommodation",
    "luxury only",
    "no museums",
    "outdoor activities only",
    "cultural sites only",
)


@dataclass(frozen=True)
class BudgetShare:
    category: str
    percent: int
    description: str

    def describe(self, duration: int) -> str:
        return self.description.format(duration=duration)


BUDGET_SPLIT: Tuple[BudgetShare, ...] = (
    BudgetShare("accommodation", 40, "Accommodation for {duration} nights"),
    BudgetShare("food", 25, "Meals for {duration} days"),
    BudgetShare("transport", 15, "Local transport and transfers"),
    BudgetShare("activities", 15, "Entry fees and activities"),
    BudgetShare("contingency", 5, "Emergency buffer"),
)


@dataclass(frozen=True)
class DayTemplate:
    activities: Tuple[str, ...]
    meals: Tuple[str, ...]
    accommodation: str


@dataclass(frozen=True)
class CuratedDestination:
    name: str
    keywords: Tuple[str, ...]
    days: Tuple[DayTemplate, ...]

    def matches(self, destination: str) -> bool:
        return any(keyword in destination for keyword in self.keywords)


def _maps_link(query: str) -> str:
    return "https://www.google.com/maps/search/?api=1&query=" + query.replace(" ", "+")


_JAIPUR_STAYS = "\n".join(
    [
        "Budget Options (₹1500-2500/night):",
        f"1. Hotel Clarks Amer - Heritage property with pool [{_maps_link('hotel clarks amer jaipur')}]",
        f"2. Alsisar Haveli - Heritage hotel with traditional décor [{_maps_link('alsisar haveli jaipur')}]",
        f"3. Samode Haveli - Heritage hotel with courtyard pool [{_maps_link('samode haveli jaipur')}]",
        "Mid-Range Options (₹2500-4000/night):",
        f"4. The Lalit Jaipur - Modern stay with full facilities [{_maps_link('the lalit jaipur')}]",
        f"5. Fairmont Jaipur - Opulent stay with scenic views [{_maps_link('fairmont jaipur')}]",
        f"6. Shahpura House - Regal ambiance with modern comforts [{_maps_link('shahpura house jaipur')}]",
        "Recommended: Hotel Clarks Amer - Best value for heritage experience and central location",
    ]
)

_MUMBAI_STAYS = "\n".join(
    [
        f"1. Budget Hotel - Basic amenities (₹1500-2000/night) [{_maps_link('budget hotel mumbai')}]",
        f"2. Mid-range Hotel - Comfort amenities (₹2000-3000/night) [{_maps_link('mid range hotel mumbai')}]",
        f"3. Premium Hotel - Luxury amenities (₹3000-4500/night) [{_maps_link('premium hotel mumbai')}]",
        f"4. Heritage Property - Unique experience (₹3500-5000/night) [{_maps_link('heritage property mumbai')}]",
        "Recommended: Mid-range Hotel - Best value for location and comfort",
    ]
)

CURATED_DESTINATIONS: Tuple[CuratedDestination, ...] = (
    CuratedDestination(
        name="Jaipur",
        keywords=("jaipur", "rajasthan"),
        days=(
            DayTemplate(
                activities=(
                    "Morning (9:00-12:00): Visit Amber Fort - UNESCO World Heritage site with stunning architecture (₹100 entry)",
                    "Afternoon (12:30-15:30): Explore Jaigarh Fort - Houses the world's largest cannon on wheels and panoramic city views (₹50 entry)",
                    "Evening (17:00-19:00): Shopping at Johari Bazaar - Famous for traditional jewelry and textiles",
                ),
                meals=(
                    "Breakfast Options:",
                    f"1. Tapri Central (₹150 per person) - Local chai and snacks [{_maps_link('tapri jaipur')}]",
                    f"2. Anokhi Café (₹200-250 per person) - Wholesome breakfast plates [{_maps_link('anokhi cafe jaipur')}]",
                    f"3. LMB (₹250-300 per person) - Famous for pyaaz kachori [{_maps_link('lmb jaipur')}]",
                    "Lunch Options:",
                    f"1. 1135 AD (₹800-1200 per person) - Dining inside Amber Fort [{_maps_link('1135 ad restaurant jaipur')}]",
                    f"2. Peacock Rooftop Restaurant (₹600-800 per person) - Indian cuisine with a view [{_maps_link('peacock rooftop restaurant jaipur')}]",
                    f"3. Rawat Mishthan Bhandar (₹200-400 per person) - Rajasthani thali and sweets [{_maps_link('rawat mishthan bhandar jaipur')}]",
                    "Dinner Options:",
                    f"1. Laxmi Niwas Palace (₹1200-1800 per person) - Royal dining experience [{_maps_link('laxmi niwas palace jaipur')}]",
                    f"2. Suvarna Mahal (₹1800-2500 per person) - Palace dining room [{_maps_link('suvarna mahal jaipur')}]",
                    f"3. Handi Restaurant (₹1000-1500 per person) - Specializes in tandoori dishes [{_maps_link('handi restaurant jaipur')}]",
                ),
                accommodation=_JAIPUR_STAYS,
            ),
            DayTemplate(
                activities=(
                    "Morning (9:30-12:30): City Palace Complex - Royal residence with museums and courtyards (₹200 entry)",
                    "Afternoon (13:00-15:00): Jantar Mantar - Astronomical instruments and UNESCO site (₹100 entry)",
                    "Evening (17:30-19:30): Hawa Mahal - Iconic palace of winds for photo opportunities",
                ),
                meals=(
                    "Breakfast: Traditional Rajasthani breakfast at hotel (₹200 per person)",
                    f"Lunch: Chokhi Dhani - Ethnic village resort experience (₹1500 per person) [{_maps_link('chokhi dhani jaipur')}]",
                    f"Dinner: Suvarna Mahal - Palace dining room (₹1800 per person) [{_maps_link('suvarna mahal jaipur')}]",
                ),
                accommodation=_JAIPUR_STAYS,
            ),
        ),
    ),
    CuratedDestination(
        name="Mumbai",
        keywords=("mumbai", "bombay"),
        days=(
            DayTemplate(
                activities=(
                    "Morning (9:00-12:00): Visit Gateway of India - Iconic arch monument on the harbour (Free entry, best 9-11 AM)",
                    "Afternoon (12:30-15:30): Explore Chhatrapati Shivaji Terminus - UNESCO listed historic railway station (₹50 entry)",
                    "Evening (17:00-19:00): Walk Marine Drive - Crescent-shaped promenade along the bay at sunset (Free)",
                ),
                meals=(
                    "BREAKFAST OPTIONS:",
                    f"1. Cafe Mondegar - Iconic retro cafe (₹200-300 per person) [{_maps_link('cafe mondegar mumbai')}]",
                    f"2. Kyani & Co. - Irani cafe classics (₹150-250 per person) [{_maps_link('kyani and co mumbai')}]",
                    "LUNCH OPTIONS:",
                    f"1. Trishna - Seafood specialists (₹800-1200 per person) [{_maps_link('trishna mumbai')}]",
                    f"2. Swati Snacks - Gujarati snacks and thali (₹400-600 per person) [{_maps_link('swati snacks mumbai')}]",
                    "DINNER OPTIONS:",
                    f"1. Masala Library - Modern Indian cuisine (₹1500-2000 per person) [{_maps_link('masala library mumbai')}]",
                    f"2. Bademiya - Late night kebabs (₹200-250 per person) [{_maps_link('bademiya mumbai')}]",
                ),
                accommodation=_MUMBAI_STAYS,
            ),
            DayTemplate(
                activities=(
                    "Morning (9:00-13:00): Ferry to Elephanta Caves - UNESCO rock-cut cave temples (₹40 entry, 45 mins by ferry)",
                    "Afternoon (15:00-17:00): Haji Ali Dargah - Mosque on an islet off the Worli coast (Free)",
                    "Evening (18:00-20:00): Bandra-Worli Sea Link drive and Bandstand promenade (Free)",
                ),
                meals=(
                    f"Breakfast: Britannia & Co. - Parsi cuisine (₹250-350 per person) [{_maps_link('britannia and co mumbai')}]",
                    f"Lunch: Gajalee - Coastal seafood (₹1000-1500 per person) [{_maps_link('gajalee mumbai')}]",
                    f"Dinner: Burma Burma - Burmese cuisine (₹600-800 per person) [{_maps_link('burma burma mumbai')}]",
                ),
                accommodation=_MUMBAI_STAYS,
            ),
        ),
    ),
)

GENERIC_ACCOMMODATION = "Centrally located hotel/guesthouse"
GENERIC_TRANSPORT = "Auto-rickshaw/taxi for local travel (₹200-800 per day)"

GENERIC_ACTIVITIES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "default": (
            "Morning (9:00-12:00): Explore local landmarks and monuments",
            "Afternoon (12:30-15:30): Cultural experience or museum visit",
            "Evening (17:00-19:00): Local cuisine and relaxation",
        ),
        "no museums": (
            "Morning (9:00-12:00): City walking tour and local markets",
            "Afternoon (12:30-15:30): Park visit and outdoor exploration",
            "Evening (17:00-19:00): Street food tour and local entertainment",
        ),
        "outdoor activities only": (
            "Morning (9:00-12:00): Nature hike and scenic viewpoints",
            "Afternoon (12:30-15:30): Outdoor adventure activity",
            "Evening (17:00-19:00): Sunset viewing and outdoor dining",
        ),
    }
)

GENERIC_MEALS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "default": (
            "Breakfast at local café",
            "Lunch at recommended restaurant",
            "Dinner at popular local spot",
        ),
        "vegetarian": (
            "Vegetarian breakfast at local café",
            "Plant-based lunch at vegetarian restaurant",
            "Vegetarian dinner at popular local spot",
        ),
    }
)

# Curated days run out after the table entries; later days use this one.
GENERIC_DAY = DayTemplate(
    activities=(
        "Morning (9:00-12:00): Visit local landmarks and cultural sites",
        "Afternoon (12:30-15:30): Cultural experience or museum visit",
        "Evening (17:00-19:00): Local cuisine and relaxation",
    ),
    meals=GENERIC_MEALS["default"],
    accommodation=GENERIC_ACCOMMODATION,
)


def find_curated_destination(destination: str) -> Optional[CuratedDestination]:
    """Return the curated itinerary whose keywords appear in ``destination``."""

    lowered = destination.lower()
    for curated in CURATED_DESTINATIONS:
        if curated.matches(lowered):
            return curated
    return None
