"""Bundled travel guides and tips loaded into the knowledge base."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class KnowledgeDocument:
    id: str
    content: str
    category: str
    name: str = ""
    region: str | None = None
    country: str | None = None
    climate: str | None = None
    budget_level: str | None = None
    activities: tuple[str, ...] = field(default_factory=tuple)
    topic: str | None = None

    def metadata(self) -> dict[str, object]:
        meta: dict[str, object] = {
            "document_id": self.id,
            "document_name": self.name or self.id,
            "category": self.category,
            "activities": list(self.activities),
        }
        for key, value in (
            ("region", self.region),
            ("country", self.country),
            ("climate", self.climate),
            ("budget_level", self.budget_level),
            ("topic", self.topic),
        ):
            if value is not None:
                meta[key] = value
        return meta


DESTINATIONS: tuple[KnowledgeDocument, ...] = (
    KnowledgeDocument(
        id="tokyo-japan",
        name="Tokyo, Japan",
        category="destination",
        region="Asia",
        country="Japan",
        climate="temperate",
        budget_level="medium-high",
        activities=("culture", "food", "shopping", "temples", "technology"),
        content="""
# Tokyo, Japan - Complete Travel Guide

## Overview
Tokyo is Japan's capital, blending ultra-modern technology with traditional
culture. Home to 14 million people, it is one of the world's most exciting cities.

## Best Time to Visit
- **Spring (March-May)**: Cherry blossom season, mild weather, perfect for walking
- **Fall (September-November)**: Comfortable temperatures, autumn colors
- **Summer (June-August)**: Hot and humid, festival season
- **Winter (December-February)**: Cold but clear, fewer crowds

## Top Attractions
- **Senso-ji Temple**: Ancient Buddhist temple in Asakusa
- **Tokyo Skytree**: 634m tower with panoramic city views
- **Shibuya Crossing**: The world's busiest pedestrian crossing
- **Tsukiji Outer Market**: Fresh seafood and street food
- **Meiji Shrine**: Peaceful Shinto shrine in Harajuku

## Neighborhoods
- **Shibuya**: Youth culture, shopping, nightlife
- **Ginza**: Luxury shopping, fine dining
- **Asakusa**: Traditional Tokyo, temples, old-style shops
- **Shinjuku**: Business district, entertainment, skyscrapers

## Food & Dining
Sushi at Tsukiji, ramen at Ichiran or Ippudo, tempura, yakitori and kaiseki.

## Transportation
JR Pass for unlimited JR trains, Tokyo Metro day passes, Suica or Pasmo IC cards.
Taxis are expensive.

## Budget Guidelines
- **Budget**: $50-80/day (hostels, street food, public transport)
- **Mid-range**: $100-200/day (hotels, restaurants, attractions)
- **Luxury**: $300+/day (high-end hotels, fine dining, private tours)

## Cultural Tips
Bow when greeting, remove shoes indoors, stay quiet on trains. Tipping is not
customary.

## Safety
Tokyo is extremely safe. Emergency numbers: 110 (police), 119 (fire/ambulance).
""",
    ),
    KnowledgeDocument(
        id="paris-france",
        name="Paris, France",
        category="destination",
        region="Europe",
        country="France",
        climate="temperate",
        budget_level="medium-high",
        activities=("culture", "art", "food", "museums", "romance"),
        content="""
# Paris, France - The City of Light

## Overview
Paris is renowned for its art, fashion, gastronomy and culture, with iconic
landmarks like the Eiffel Tower and the Louvre.

## Best Time to Visit
- **Spring (April-June)**: Pleasant weather, blooming gardens
- **Fall (September-November)**: Mild temperatures, fewer crowds
- **Summer (July-August)**: Warm but crowded and expensive
- **Winter (December-March)**: Cold, Christmas markets, fewer tourists

## Top Attractions
- **Eiffel Tower**: Best views at sunset
- **Louvre Museum**: The world's largest art museum, home to the Mona Lisa
- **Arc de Triomphe**: Triumphal arch at Place Charles de Gaulle
- **Sacre-Coeur**: Basilica atop Montmartre hill

## Neighborhoods
- **Le Marais**: Historic quarter, boutiques, galleries
- **Montmartre**: Artistic district, street artists
- **Saint-Germain**: Cafes, bookshops, galleries
- **Latin Quarter**: Student area, medieval streets

## Food & Dining
Croissants from local boulangeries, coq au vin, cheese from fromageries,
macarons, and wine at neighborhood bistros.

## Transportation
Metro day passes, Velib' bike sharing, and walking between central sights.

## Budget Guidelines
- **Budget**: $60-100/day (hostels, cafes, museums)
- **Mid-range**: $150-250/day (hotels, restaurants, attractions)
- **Luxury**: $400+/day (luxury hotels, fine dining, private tours)

## Cultural Tips
Say "Bonjour" when entering shops. Lunch is 12-2pm, dinner after 7:30pm.

## Safety
Generally safe; watch for pickpockets in tourist areas. Emergency number: 112.
""",
    ),
    KnowledgeDocument(
        id="bali-indonesia",
        name="Bali, Indonesia",
        category="destination",
        region="Asia",
        country="Indonesia",
        climate="tropical",
        budget_level="budget-friendly",
        activities=("beaches", "culture", "wellness", "surfing", "temples"),
        content="""
# Bali, Indonesia - Island Paradise

## Overview
Bali is known for volcanic mountains, rice paddies, beaches and coral reefs,
and for its Hindu temples and arts scene.

## Best Time to Visit
- **Dry Season (April-October)**: Minimal rainfall, ideal for outdoor activities
- **Wet Season (November-March)**: Afternoon showers, fewer crowds, lower prices

## Top Attractions
- **Tanah Lot Temple**: Sea temple on a rock formation
- **Ubud**: Rice terraces, art galleries, yoga retreats
- **Mount Batur**: Active volcano with sunrise hikes
- **Uluwatu Temple**: Clifftop temple with Kecak dance

## Activities
Surfing at Uluwatu and Canggu, yoga in Ubud, temple hopping, volcano hiking,
snorkeling and diving around Nusa Penida.

## Food & Dining
Nasi goreng, satay, gado-gado, rendang, and grilled seafood at Jimbaran beach.

## Transportation
Scooter rental, private drivers for day trips, Grab in main areas.

## Budget Guidelines
- **Budget**: $25-40/day (guesthouses, local food, public transport)
- **Mid-range**: $50-100/day (hotels, restaurants, tours)
- **Luxury**: $200+/day (resorts, fine dining, private tours)

## Cultural Tips
Dress modestly at temples, use your right hand to give and receive.

## Safety
Mind traffic, strong ocean currents and petty theft. Emergency number: 112.
""",
    ),
)

TRAVEL_TIPS: tuple[KnowledgeDocument, ...] = (
    KnowledgeDocument(
        id="budget-travel-tips",
        category="tips",
        topic="budget",
        content="""
# Budget Travel Tips - Travel More for Less

## Accommodation
Hostels, Airbnb, Couchsurfing and house-sitting.

## Transportation
Book early, use flexible date searches, take public transport, walk or bike.

## Food & Dining
Street food, cook your own meals from local markets, lunch specials, happy hours.

## Activities
Free walking tours, museum free days, hiking, beaches and parks, local festivals.

## Money-Saving Tips
Travel insurance, city passes, student discounts with an ISIC card, off-season travel.
""",
    ),
    KnowledgeDocument(
        id="safety-travel-tips",
        category="tips",
        topic="safety",
        content="""
# Travel Safety Tips - Stay Safe While Exploring

## Before You Go
Research local laws and customs, buy travel insurance, keep copies of documents,
share your itinerary.

## Money & Documents
Carry multiple payment methods, use hotel safes, prefer bank ATMs, learn common scams.

## Health & Medical
Check vaccinations 4-6 weeks ahead, bring prescriptions in original containers,
drink bottled water in developing countries.

## Personal Safety
Stay alert, blend in, use reputable transportation, choose safe neighborhoods.

## Communication
Get a local SIM card, know local emergency numbers, register with your embassy
on long trips.
""",
    ),
)

ALL_DOCUMENTS: tuple[KnowledgeDocument, ...] = DESTINATIONS + TRAVEL_TIPS
