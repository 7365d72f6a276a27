"""Destination knowledge — curated profiles, archetype patterns, regional facts.

Tables are read-only; synthesis copies entries before handing them out.
"""

ARCHETYPES = ("metropolitan", "heritage", "beach", "mountain", "adventure", "modern", "general")

INDIAN_RUPEE = "₹ (Indian Rupee)"

# Exact-name lookup (lower-case key)
DESTINATION_PROFILES: dict[str, dict[str, str]] = {
    # India
    "hyderabad": {
        "country": "India", "region": "Telangana", "type": "metropolitan",
        "currency": INDIAN_RUPEE, "language": "Telugu, Hindi, English",
        "description": "City of Pearls and Nizams, famous for Biryani and IT industry",
        "bestTime": "October to March",
    },
    "bhubaneswar": {
        "country": "India", "region": "Odisha", "type": "heritage",
        "currency": INDIAN_RUPEE, "language": "Odia, Hindi, English",
        "description": "Temple City of India with ancient Kalinga architecture and caves",
        "bestTime": "October to March",
    },
    "mumbai": {
        "country": "India", "region": "Maharashtra", "type": "metropolitan",
        "currency": INDIAN_RUPEE, "language": "Hindi, Marathi, English",
        "description": "Financial capital and Bollywood hub of India",
        "bestTime": "November to February",
    },
    "delhi": {
        "country": "India", "region": "NCT", "type": "metropolitan",
        "currency": INDIAN_RUPEE, "language": "Hindi, English",
        "description": "Capital city with rich Mughal and British heritage",
        "bestTime": "October to March",
    },
    "bangalore": {
        "country": "India", "region": "Karnataka", "type": "metropolitan",
        "currency": INDIAN_RUPEE, "language": "Kannada, English",
        "description": "Silicon Valley of India with pleasant weather",
        "bestTime": "October to February",
    },
    "chennai": {
        "country": "India", "region": "Tamil Nadu", "type": "metropolitan",
        "currency": INDIAN_RUPEE, "language": "Tamil, English",
        "description": "Cultural capital of South India and major port city",
        "bestTime": "November to February",
    },
    "kolkata": {
        "country": "India", "region": "West Bengal", "type": "metropolitan",
        "currency": INDIAN_RUPEE, "language": "Bengali, Hindi, English",
        "description": "City of Joy with rich literary and cultural heritage",
        "bestTime": "October to March",
    },
    "jaipur": {
        "country": "India", "region": "Rajasthan", "type": "heritage",
        "currency": INDIAN_RUPEE, "language": "Hindi, Rajasthani, English",
        "description": "Pink City with magnificent palaces and forts",
        "bestTime": "October to March",
    },
    "agra": {
        "country": "India", "region": "Uttar Pradesh", "type": "heritage",
        "currency": INDIAN_RUPEE, "language": "Hindi, English",
        "description": "Home to the iconic Taj Mahal and Mughal architecture",
        "bestTime": "October to March",
    },
    "goa": {
        "country": "India", "region": "Goa", "type": "beach",
        "currency": INDIAN_RUPEE, "language": "Konkani, Portuguese, English",
        "description": "Tropical paradise with beaches and Portuguese heritage",
        "bestTime": "November to February",
    },
    "shimla": {
        "country": "India", "region": "Himachal Pradesh", "type": "mountain",
        "currency": INDIAN_RUPEE, "language": "Hindi, English",
        "description": "Queen of Hills with colonial charm and pine forests",
        "bestTime": "March to June, September to December",
    },
    "manali": {
        "country": "India", "region": "Himachal Pradesh", "type": "adventure",
        "currency": INDIAN_RUPEE, "language": "Hindi, English",
        "description": "Adventure capital with snow-capped peaks and valleys",
        "bestTime": "May to October",
    },
    # International
    "paris": {
        "country": "France", "region": "Île-de-France", "type": "heritage",
        "currency": "€ (Euro)", "language": "French, English",
        "description": "City of Light with world-class art, cuisine, and romance",
        "bestTime": "April to June, September to October",
    },
    "london": {
        "country": "UK", "region": "England", "type": "metropolitan",
        "currency": "£ (Pound Sterling)", "language": "English",
        "description": "Historic capital with royal heritage and modern culture",
        "bestTime": "May to September",
    },
    "tokyo": {
        "country": "Japan", "region": "Kanto", "type": "metropolitan",
        "currency": "¥ (Japanese Yen)", "language": "Japanese, English",
        "description": "Futuristic metropolis blending tradition with technology",
        "bestTime": "March to May, September to November",
    },
    "dubai": {
        "country": "UAE", "region": "Dubai", "type": "modern",
        "currency": "AED (UAE Dirham)", "language": "Arabic, English",
        "description": "Luxury destination with modern architecture and shopping",
        "bestTime": "November to March",
    },
    "singapore": {
        "country": "Singapore", "region": "Singapore", "type": "metropolitan",
        "currency": "SGD (Singapore Dollar)", "language": "English, Mandarin, Malay, Tamil",
        "description": "Garden city-state with diverse culture and cuisine",
        "bestTime": "February to April",
    },
}

# Checked in order; first archetype with a keyword contained in the name wins.
ARCHETYPE_PATTERNS: dict[str, tuple[str, ...]] = {
    "mountain": ("hill", "mountain", "peak", "valley", "shimla", "manali", "ooty", "darjeeling",
                 "munnar", "kodai", "mussoorie", "nainital"),
    "beach": ("beach", "coastal", "island", "goa", "kerala", "maldives", "bali", "phuket",
              "andaman", "lakshadweep", "pondicherry"),
    "heritage": ("fort", "palace", "temple", "monument", "historical", "ancient", "agra",
                 "varanasi", "khajuraho", "hampi", "ujjain", "pushkar"),
    "adventure": ("trek", "adventure", "sports", "rishikesh", "leh", "ladakh", "nepal", "kasol",
                  "tosh", "malana"),
    "metropolitan": ("city", "metro", "urban", "bangalore", "pune", "ahmedabad", "surat",
                     "kochi", "indore"),
}

# Profile fields for destinations that match no curated entry
DEFAULT_PROFILE: dict[str, str] = {
    "country": "India",
    "region": "India",
    "bestTime": "October to March",
    "currency": INDIAN_RUPEE,
    "language": "Local language, Hindi, English",
    "timeZone": "IST (UTC+5:30)",
}

ARCHETYPE_DESCRIPTIONS: dict[str, str] = {
    "metropolitan": "{name} is a vibrant metropolitan city known for its modern infrastructure, cultural diversity, and urban attractions.",
    "heritage": "{name} is a historic destination famous for its rich cultural heritage, ancient monuments, and traditional architecture.",
    "beach": "{name} is a beautiful coastal destination offering pristine beaches, water activities, and tropical experiences.",
    "mountain": "{name} is a scenic mountain destination perfect for nature lovers seeking cool climate and breathtaking views.",
    "adventure": "{name} is an adventure hub ideal for thrill-seekers and outdoor enthusiasts looking for exciting activities.",
    "modern": "{name} is a modern city showcasing contemporary architecture, shopping, and urban lifestyle.",
    "general": "{name} is a fascinating destination offering unique local experiences and cultural attractions.",
}

TIME_ZONES: dict[str, str] = {
    "India": "IST (UTC+5:30)",
    "France": "CET (UTC+1)",
    "UK": "GMT (UTC+0)",
    "Japan": "JST (UTC+9)",
    "UAE": "GST (UTC+4)",
    "Thailand": "ICT (UTC+7)",
    "Singapore": "SGT (UTC+8)",
    "USA": "Multiple zones (UTC-5 to UTC-8)",
}
UNKNOWN_TIME_ZONE = "Check local time zone information"

EMERGENCY_CONTACTS: dict[str, dict[str, str]] = {
    "India": {"police": "100", "medical": "108", "fire": "101", "tourist": "1363", "women": "1091"},
    "France": {"police": "17", "medical": "15", "fire": "18", "european": "112"},
    "UK": {"police": "999", "medical": "999", "fire": "999", "non_emergency": "101"},
    "Japan": {"police": "110", "medical": "119", "fire": "119", "tourist": "050-3816-2787"},
    "UAE": {"police": "999", "medical": "998", "fire": "997", "tourist": "800-424"},
    "Thailand": {"police": "191", "medical": "1669", "fire": "199", "tourist": "1672"},
}
DEFAULT_EMERGENCY_CONTACTS: dict[str, str] = {
    "police": "Local police",
    "medical": "Local emergency",
    "fire": "Fire department",
}

# Home country of the traveller base; embassy advice applies outside it.
HOME_COUNTRY = "India"
