"""Prompt templates for trip planning, destination comparison and safety checks."""

from datetime import datetime

from tripwise.schemas.trip import TripRequest
from tripwise.services.fallback_synthesizer import FIRST_DAY_THEME, LAST_DAY_THEME

TRIP_SYSTEM = (
    "You are a professional travel planner with deep local knowledge of destinations "
    "worldwide. Always provide specific, real place names and practical information. "
    "Never use generic terms."
)

COMPARISON_SYSTEM = (
    "You are an expert travel advisor. Provide structured JSON responses with detailed "
    "destination comparisons."
)

SAFETY_SYSTEM = (
    "You are a travel safety analyst. You ONLY report on safety concerns when there is "
    "REAL, RECENT news evidence. You do not speculate or use outdated information. If no "
    "recent concerning news exists, you report the destination as safe."
)


def _day_theme(day: int, days: int) -> str:
    if day == 1:
        return FIRST_DAY_THEME
    if day == days:
        return LAST_DAY_THEME
    return f"Cultural Immersion Day {day - 1}"


def build_trip_prompt(request: TripRequest) -> str:
    days = request.days
    day_entries = ",\n".join(
        f"""    {{
      "day": {day},
      "theme": "{_day_theme(day, days)}",
      "morning": "SPECIFIC activity with exact location name and timing",
      "afternoon": "SPECIFIC restaurant name and activity",
      "evening": "SPECIFIC evening activity with location",
      "meals": {{
        "breakfast": "SPECIFIC restaurant/place name with dish recommendations",
        "lunch": "SPECIFIC restaurant name with signature dishes",
        "dinner": "SPECIFIC restaurant name with must-try items"
      }},
      "accommodation": "SPECIFIC hotel name or area recommendation",
      "transportation": "How to get around (specific transport options)",
      "tips": "Day-specific practical tips and local insights",
      "estimatedCost": "Realistic daily cost breakdown"
    }}"""
        for day in range(1, days + 1)
    )
    budget = round(request.budget)

    return f"""You are an expert travel planner with extensive knowledge of destinations worldwide. Create a comprehensive, detailed trip plan with SPECIFIC place names, restaurant names, and exact locations.

TRIP REQUEST:
- Destination: {request.destination}
- Traveler: {request.name}, age {request.age}
- Group size: {request.people} people
- Duration: {days} days
- Budget: ₹{budget}
- Transportation: {request.transport}
- Accommodation: {request.hotel}
- Interests: {request.activities or "general sightseeing"}

CRITICAL REQUIREMENTS:
1. Provide REAL, SPECIFIC place names and restaurant names
2. Include exact addresses or areas where possible
3. Mention actual hotels, restaurants, and attractions by name
4. Give realistic costs in local currency
5. Create detailed day-by-day itinerary with morning/afternoon/evening activities

Respond with this EXACT JSON structure (no markdown formatting):

{{
  "destination": {{
    "name": "{request.destination}",
    "country": "Country name",
    "region": "State/Province/Region",
    "type": "metropolitan/heritage/beach/mountain/adventure/modern",
    "description": "Compelling 2-sentence description highlighting unique aspects",
    "bestTime": "Best months to visit with weather details",
    "climate": "Current season weather and what to expect",
    "currency": "Local currency with symbol",
    "language": "Primary languages spoken",
    "timeZone": "Time zone with UTC offset"
  }},
  "attractions": [
    {{
      "name": "SPECIFIC attraction name",
      "description": "Detailed description of what makes this special",
      "category": "historical/cultural/natural/spiritual/modern",
      "visitDuration": "Realistic time needed",
      "entryFee": "Exact cost or range in local currency",
      "bestTimeToVisit": "Best time of day with reasoning",
      "location": "Specific area/address/landmark nearby"
    }}
  ],
  "activities": [
    {{
      "name": "Specific activity name",
      "description": "What exactly this involves and why it's worth doing",
      "duration": "How long it takes",
      "cost": "Realistic cost estimate",
      "difficulty": "easy/moderate/challenging",
      "ageAppropriate": {"false" if request.age > 65 else "true"},
      "location": "Where exactly this happens"
    }}
  ],
  "cuisine": [
    {{
      "dish": "Exact local dish name",
      "description": "What it is, ingredients, why it's special to this region",
      "restaurants": "2-3 SPECIFIC restaurant names where to find it",
      "price": "Price range in local currency",
      "mustTry": true,
      "dietaryInfo": "Veg/Non-veg/Vegan options available"
    }}
  ],
  "dailyItinerary": [
{day_entries}
  ],
  "budget": {{
    "accommodation": {round(budget * 0.35)},
    "food": {round(budget * 0.25)},
    "activities": {round(budget * 0.25)},
    "transport": {round(budget * 0.10)},
    "shopping": {round(budget * 0.05)},
    "total": {budget},
    "breakdown": "Detailed explanation of how budget is allocated"
  }},
  "accommodation": {{
    "budget": "2-3 SPECIFIC budget hotel names with approximate rates",
    "standard": "2-3 SPECIFIC mid-range hotel names with rates",
    "luxury": "2-3 SPECIFIC luxury hotel names with rates",
    "areas": "Best specific neighborhoods/areas to stay"
  }},
  "transportation": {{
    "toDestination": {{
      "flight": "Specific airport names and airlines that operate, average cost",
      "train": "Specific railway stations and train names, booking tips",
      "bus": "Specific bus operators and routes"
    }},
    "local": "Specific local transport options, costs and practical advice"
  }},
  "shopping": [
    {{
      "market": "SPECIFIC market name",
      "description": "Why this market is special to the region",
      "popularItems": "Local products and crafts to buy here",
      "location": "Area or address",
      "operatingHours": "Opening hours",
      "bestTimeToVisit": "Best time of day",
      "tips": "Bargaining tips"
    }}
  ],
  "tips": [
    "SPECIFIC cultural etiquette for {request.destination}",
    "Weather-specific packing advice for current season",
    "Local scams to avoid and safety tips",
    "Best time of day to visit major attractions to avoid crowds",
    "Language phrases that will be helpful",
    "Currency exchange tips and payment methods accepted",
    "Local customs and traditions to respect"
  ],
  "emergency": {{
    "contacts": {{
      "police": "Local emergency number",
      "medical": "Medical emergency number",
      "fire": "Fire emergency number",
      "tourist": "Tourist helpline if available"
    }},
    "hospitals": "2-3 SPECIFIC hospital names and locations",
    "embassy": "Embassy/consulate information if international travel",
    "precautions": "Specific safety precautions for {request.destination}"
  }}
}}

Make every detail SPECIFIC to {request.destination}. Use real place names, actual restaurant names, genuine hotel suggestions, and authentic local information. Avoid generic terms like "local restaurant" or "nearby attractions"."""


def build_comparison_prompt(
    destinations: list[str],
    priorities: list[str],
    budget,
    duration,
    month,
) -> str:
    dest_list = "\n".join(f"- {d}" for d in destinations)
    priority_list = "\n".join(f"- {p}" for p in priorities)

    return f"""You are an expert travel advisor. Compare the following destinations based on the user's preferences and constraints.

DESTINATIONS TO COMPARE:
{dest_list}

USER PREFERENCES & CONSTRAINTS:
Budget: ₹{budget}
Trip Duration: {duration} days
Preferred Month: {month}
Travel Priorities:
{priority_list}

For EACH destination, provide a detailed comparison in the following JSON format (respond with ONLY valid JSON, no markdown):

[
  {{
    "destination": "Destination Name",
    "matchScore": 85,
    "overview": "Brief 2-3 sentence overview of the destination",
    "climate": "Weather and climate information for the specified month",
    "budget": "Detailed budget breakdown for accommodation, food, activities, transport",
    "highlights": ["Highlight 1", "Highlight 2", "Highlight 3", "Highlight 4"],
    "considerations": ["Consideration 1", "Consideration 2", "Consideration 3"],
    "activities": "1. Activity name and description\\n2. Activity name and description\\n3. Activity name and description\\n4. Activity name and description"
  }}
]

IMPORTANT:
- matchScore should be 0-100 based on how well the destination matches user priorities
- Be specific about costs in INR (Indian Rupees)
- Consider seasonal factors for the {month}
- Keep all responses practical and helpful
- For activities, provide as numbered list format (1. Activity, 2. Activity, etc.)
- Respond ONLY with valid JSON array, no additional text"""


def _long_date(value: datetime) -> str:
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def _short_date(value: str | None) -> str:
    if not value:
        return "Unknown date"
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return "Unknown date"
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def build_news_context(articles: list[dict] | None) -> str:
    if not articles:
        return (
            "\n\nNo recent news articles found. Based on general knowledge, assess if this "
            "destination has any known ongoing safety concerns. If you are not aware of any "
            "current issues, set hasConcerns to false."
        )

    lines = ["\n\nRECENT NEWS ARTICLES (Last 30 days):"]
    for idx, article in enumerate(articles, start=1):
        lines.append(
            f"{idx}. [{_short_date(article.get('publishedAt'))}] {article.get('title') or ''}"
        )
        lines.append(f"   {article.get('description') or ''}")
    lines.append(
        "\n\nUse ONLY these real news articles to assess safety. Do not use outdated information."
    )
    return "\n".join(lines)


def build_safety_prompt(destination: str, articles: list[dict] | None, now: datetime) -> str:
    return f"""You are a travel safety expert analyzing REAL CURRENT NEWS for travel destinations.

Destination: {destination}
Current Date: {_long_date(now)}
{build_news_context(articles)}

CRITICAL INSTRUCTIONS:
1. ONLY use the news articles provided above (if any)
2. DO NOT make up news or use outdated information
3. If no recent news articles are found, assume the destination is currently safe
4. Only flag concerns if there are ACTUAL recent news articles showing:
   - Active conflicts, wars, or military operations
   - Terrorist attacks (within last 30 days)
   - Natural disasters (currently ongoing)
   - Major civil unrest or riots (currently happening)
   - Disease outbreaks
   - Official travel bans

Respond with this EXACT JSON structure (no markdown formatting):

{{
  "destination": "{destination}",
  "hasConcerns": true/false,
  "severityLevel": "low/medium/high/none",
  "mainConcern": "Brief description based ONLY on the real news provided above (null if no concerns)",
  "newsHeadlines": [
    {{
      "title": "Exact headline from the news articles above",
      "summary": "Brief summary from the article",
      "date": "Actual date from the article (e.g., 'Nov 7, 2024')"
    }}
  ],
  "recommendations": [
    "Specific safety recommendation based on real news (empty array if no concerns)"
  ],
  "lastUpdated": "{now.isoformat()}"
}}

IMPORTANT:
- If no recent concerning news exists, set: hasConcerns: false, severityLevel: "none", mainConcern: null, newsHeadlines: [], recommendations: []
- DO NOT mention "civil unrest" unless there are specific recent articles about it
- BE VERY CONSERVATIVE - only flag real, recent, verified concerns
- Use actual dates from the news articles provided"""
