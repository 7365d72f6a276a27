"""Static trip content — attractions, activities, cuisine, markets, costs.

Attraction and activity templates may reference ``{name}`` (the destination as
typed by the traveller). Activity ``maxAge`` marks the age from which the
activity is no longer flagged as age-appropriate.
"""

# ─── Attractions ───

CITY_ATTRACTIONS: dict[str, list[dict]] = {
    "bhubaneswar": [
        {"name": "Lingaraj Temple", "description": "Ancient 11th-century temple dedicated to Lord Shiva, architectural masterpiece", "category": "spiritual", "visitDuration": "1-2 hours", "entryFee": "Free", "bestTimeToVisit": "Early morning", "location": "Old Town, Lingaraj Nagar"},
        {"name": "Khandagiri & Udayagiri Caves", "description": "Ancient Jain rock-cut caves from 2nd century BCE with inscriptions", "category": "historical", "visitDuration": "2-3 hours", "entryFee": "₹25", "bestTimeToVisit": "Morning", "location": "Khandagiri Road, 6km from city center"},
        {"name": "Odisha State Museum", "description": "Rich collection of archaeology, natural history, and tribal artifacts", "category": "cultural", "visitDuration": "1-2 hours", "entryFee": "₹10", "bestTimeToVisit": "Morning", "location": "Lewis Road, near Secretariat"},
        {"name": "Mukteshwar Temple", "description": "10th-century temple with exquisite stone carvings and torana", "category": "spiritual", "visitDuration": "1 hour", "entryFee": "Free", "bestTimeToVisit": "Morning", "location": "Old Town area"},
        {"name": "Rajarani Temple", "description": "Sculptural masterpiece known as Love Temple with intricate carvings", "category": "historical", "visitDuration": "1 hour", "entryFee": "₹15", "bestTimeToVisit": "Sunset", "location": "Near Bhubaneswar Airport"},
        {"name": "Dhauli Peace Pagoda", "description": "Buddhist stupa marking Emperor Ashoka's transformation site", "category": "spiritual", "visitDuration": "1-2 hours", "entryFee": "Free", "bestTimeToVisit": "Evening", "location": "Dhauli Hills, 8km south"},
    ],
    "hyderabad": [
        {"name": "Charminar", "description": "Iconic 16th-century monument and symbol of Hyderabad", "category": "historical", "visitDuration": "1-2 hours", "entryFee": "₹30", "bestTimeToVisit": "Evening", "location": "Charminar Road, Old City"},
        {"name": "Golconda Fort", "description": "Magnificent fortress with acoustic marvels and diamond history", "category": "historical", "visitDuration": "3-4 hours", "entryFee": "₹30", "bestTimeToVisit": "Morning", "location": "Ibrahim Bagh, Golconda"},
        {"name": "Ramoji Film City", "description": "World's largest integrated film studio complex", "category": "entertainment", "visitDuration": "8-10 hours", "entryFee": "₹1200-2500", "bestTimeToVisit": "Full day", "location": "Abdullahpurmet, Ranga Reddy District"},
        {"name": "Hussain Sagar Lake", "description": "Heart-shaped lake with 58-feet Buddha statue", "category": "natural", "visitDuration": "2-3 hours", "entryFee": "₹50-200", "bestTimeToVisit": "Evening", "location": "Tank Bund Road"},
        {"name": "Salar Jung Museum", "description": "One of India's largest art museums with rare collections", "category": "cultural", "visitDuration": "2-3 hours", "entryFee": "₹20", "bestTimeToVisit": "Morning", "location": "Salar Jung Road, Darushifa"},
    ],
    "mumbai": [
        {"name": "Gateway of India", "description": "Iconic arch monument overlooking Mumbai Harbor", "category": "historical", "visitDuration": "1-2 hours", "entryFee": "Free", "bestTimeToVisit": "Evening", "location": "Apollo Bunder, Colaba"},
        {"name": "Marine Drive", "description": "Queen's Necklace - curved promenade along the coast", "category": "natural", "visitDuration": "2-3 hours", "entryFee": "Free", "bestTimeToVisit": "Sunset", "location": "Nariman Point to Babulnath"},
        {"name": "Elephanta Caves", "description": "Ancient rock-cut caves with Lord Shiva sculptures", "category": "historical", "visitDuration": "4-5 hours", "entryFee": "₹40", "bestTimeToVisit": "Morning", "location": "Elephanta Island (ferry from Gateway)"},
        {"name": "Juhu Beach", "description": "Popular beach with street food and sunset views", "category": "natural", "visitDuration": "2-3 hours", "entryFee": "Free", "bestTimeToVisit": "Evening", "location": "Juhu Tara Road, Juhu"},
        {"name": "Crawford Market", "description": "Historic market for fruits, spices, and local goods", "category": "shopping", "visitDuration": "1-2 hours", "entryFee": "Free", "bestTimeToVisit": "Morning", "location": "Lokamanya Tilak Marg, Fort"},
    ],
}

ATTRACTION_TEMPLATES: dict[str, list[dict]] = {
    "metropolitan": [
        {"name": "{name} City Center", "description": "Main commercial and cultural hub with shopping and dining", "category": "urban", "visitDuration": "2-3 hours", "entryFee": "Free", "bestTimeToVisit": "Evening", "location": "Central business district"},
        {"name": "Local Art Museum", "description": "Regional art and cultural heritage museum", "category": "cultural", "visitDuration": "1-2 hours", "entryFee": "₹50-200", "bestTimeToVisit": "Morning", "location": "Museum district"},
        {"name": "Historic Temple Complex", "description": "Ancient temples showcasing local architecture", "category": "spiritual", "visitDuration": "1-2 hours", "entryFee": "Free-₹50", "bestTimeToVisit": "Early morning", "location": "Old town area"},
        {"name": "Central Market", "description": "Bustling marketplace for local products and street food", "category": "shopping", "visitDuration": "2-4 hours", "entryFee": "Free", "bestTimeToVisit": "Evening", "location": "Market district"},
        {"name": "City Gardens", "description": "Public parks and botanical gardens for relaxation", "category": "nature", "visitDuration": "1-3 hours", "entryFee": "Free-₹20", "bestTimeToVisit": "Morning", "location": "Green belt area"},
    ],
    "heritage": [
        {"name": "{name} Fort", "description": "Historic fortification with panoramic city views", "category": "historical", "visitDuration": "2-4 hours", "entryFee": "₹100-500", "bestTimeToVisit": "Morning", "location": "Hill top area"},
        {"name": "Ancient Temple Complex", "description": "Centuries-old temples with intricate stone carvings", "category": "spiritual", "visitDuration": "1-2 hours", "entryFee": "₹25-100", "bestTimeToVisit": "Early morning", "location": "Temple town area"},
        {"name": "Archaeological Museum", "description": "Artifacts and sculptures from ancient civilizations", "category": "cultural", "visitDuration": "1-3 hours", "entryFee": "₹50-200", "bestTimeToVisit": "Morning", "location": "Heritage district"},
        {"name": "Royal Palace", "description": "Former royal residence showcasing regal architecture", "category": "historical", "visitDuration": "1-2 hours", "entryFee": "₹50-150", "bestTimeToVisit": "Any time", "location": "Palace grounds"},
        {"name": "Heritage Walk Route", "description": "Guided walking tour through historic quarters", "category": "cultural", "visitDuration": "2-3 hours", "entryFee": "₹200-500", "bestTimeToVisit": "Evening", "location": "Old city area"},
    ],
    "beach": [
        {"name": "{name} Main Beach", "description": "Pristine coastline with golden sand and clear waters", "category": "natural", "visitDuration": "4-6 hours", "entryFee": "Free", "bestTimeToVisit": "Morning/Evening", "location": "Coastal stretch"},
        {"name": "Water Sports Center", "description": "Adventure activities like jet skiing and parasailing", "category": "adventure", "visitDuration": "2-4 hours", "entryFee": "₹1000-3000", "bestTimeToVisit": "Morning", "location": "Beach front"},
        {"name": "Coastal Temple", "description": "Seaside shrine with ocean views and sunset prayers", "category": "spiritual", "visitDuration": "1-2 hours", "entryFee": "Free", "bestTimeToVisit": "Sunset", "location": "Rocky coastline"},
        {"name": "Fishing Harbor", "description": "Traditional fishing village with fresh seafood", "category": "cultural", "visitDuration": "2-3 hours", "entryFee": "Free", "bestTimeToVisit": "Early morning", "location": "Harbor area"},
        {"name": "Lighthouse", "description": "Historic beacon with panoramic coastal views", "category": "historical", "visitDuration": "1 hour", "entryFee": "₹30-100", "bestTimeToVisit": "Sunset", "location": "Headland point"},
    ],
    "mountain": [
        {"name": "{name} Peak Viewpoint", "description": "Breathtaking panoramic views of valleys and peaks", "category": "natural", "visitDuration": "2-4 hours", "entryFee": "Free-₹50", "bestTimeToVisit": "Sunrise/Sunset", "location": "Highest accessible point"},
        {"name": "Nature Trails", "description": "Well-marked hiking paths through forest and meadows", "category": "adventure", "visitDuration": "3-6 hours", "entryFee": "Free-₹100", "bestTimeToVisit": "Morning", "location": "Forest reserve area"},
        {"name": "Alpine Gardens", "description": "High-altitude botanical gardens with rare flora", "category": "nature", "visitDuration": "1-3 hours", "entryFee": "₹30-100", "bestTimeToVisit": "Morning", "location": "Garden district"},
        {"name": "Cable Car Station", "description": "Scenic aerial ride with mountain valley views", "category": "adventure", "visitDuration": "1-2 hours", "entryFee": "₹200-800", "bestTimeToVisit": "Clear weather", "location": "Valley base station"},
        {"name": "Hill Station Temple", "description": "Serene mountain shrine with spiritual ambiance", "category": "spiritual", "visitDuration": "1-2 hours", "entryFee": "Free", "bestTimeToVisit": "Early morning", "location": "Temple hill"},
    ],
    "adventure": [
        {"name": "{name} Base Camp", "description": "Starting point for treks with gear rental and guide desks", "category": "adventure", "visitDuration": "2-3 hours", "entryFee": "Free", "bestTimeToVisit": "Early morning", "location": "Trailhead area"},
        {"name": "River Rafting Point", "description": "Graded rapids with certified rafting operators", "category": "adventure", "visitDuration": "3-4 hours", "entryFee": "₹1000-3000", "bestTimeToVisit": "Morning", "location": "Riverside launch point"},
        {"name": "Paragliding Ridge", "description": "Tandem flights over the valley with trained pilots", "category": "adventure", "visitDuration": "1-2 hours", "entryFee": "₹2000-4000", "bestTimeToVisit": "Late morning", "location": "Ridge take-off site"},
        {"name": "Valley Monastery", "description": "Quiet monastery with prayer halls and valley views", "category": "spiritual", "visitDuration": "1-2 hours", "entryFee": "Free", "bestTimeToVisit": "Afternoon", "location": "Upper valley"},
        {"name": "Local Bazaar", "description": "Market for woollens, trekking supplies, and snacks", "category": "shopping", "visitDuration": "1-2 hours", "entryFee": "Free", "bestTimeToVisit": "Evening", "location": "Town center"},
    ],
    "modern": [
        {"name": "{name} Skyline Observation Deck", "description": "High-rise viewing platform over the city and coast", "category": "modern", "visitDuration": "1-2 hours", "entryFee": "₹1500-4000", "bestTimeToVisit": "Sunset", "location": "Downtown tower district"},
        {"name": "Grand Shopping Mall", "description": "Flagship mall with global brands, aquarium, and dining", "category": "shopping", "visitDuration": "3-5 hours", "entryFee": "Free", "bestTimeToVisit": "Evening", "location": "Downtown"},
        {"name": "Waterfront Promenade", "description": "Landscaped marina walk with cafes and fountain shows", "category": "urban", "visitDuration": "2-3 hours", "entryFee": "Free", "bestTimeToVisit": "Evening", "location": "Marina"},
        {"name": "Museum of the Future", "description": "Contemporary exhibits on design, science, and technology", "category": "cultural", "visitDuration": "2-3 hours", "entryFee": "₹800-2000", "bestTimeToVisit": "Morning", "location": "Business district"},
        {"name": "Old Quarter Souk", "description": "Traditional market lanes for spices, gold, and textiles", "category": "historical", "visitDuration": "2-3 hours", "entryFee": "Free", "bestTimeToVisit": "Morning", "location": "Historic creek area"},
    ],
}

# ─── Activities ───

ACTIVITY_TEMPLATES: dict[str, list[dict]] = {
    "metropolitan": [
        {"name": "Heritage Walking Tour", "description": "Guided exploration of historic neighborhoods and monuments", "duration": "3-4 hours", "cost": "₹300-800", "difficulty": "easy", "maxAge": None, "location": "Old city area"},
        {"name": "Street Food Safari", "description": "Culinary journey through local markets and food streets", "duration": "2-4 hours", "cost": "₹500-1500", "difficulty": "easy", "maxAge": None, "location": "Food districts"},
        {"name": "Local Market Experience", "description": "Shopping tour of traditional bazaars and modern malls", "duration": "2-6 hours", "cost": "₹500-5000", "difficulty": "easy", "maxAge": None, "location": "Shopping areas"},
        {"name": "Cultural Performance", "description": "Traditional music, dance, and theater shows", "duration": "1-2 hours", "cost": "₹200-1000", "difficulty": "easy", "maxAge": 70, "location": "Cultural centers"},
        {"name": "Photography Workshop", "description": "Capture city's essence with professional guidance", "duration": "2-4 hours", "cost": "₹800-2000", "difficulty": "easy", "maxAge": None, "location": "Scenic spots"},
    ],
    "heritage": [
        {"name": "Archaeological Site Tour", "description": "Expert-guided exploration of ancient ruins and monuments", "duration": "2-4 hours", "cost": "₹200-500", "difficulty": "easy", "maxAge": None, "location": "Heritage sites"},
        {"name": "Traditional Craft Workshop", "description": "Learn local handicrafts from master artisans", "duration": "2-4 hours", "cost": "₹500-2000", "difficulty": "moderate", "maxAge": 65, "location": "Craft centers"},
        {"name": "Historical Storytelling Tour", "description": "Immersive tales of ancient legends and history", "duration": "2-3 hours", "cost": "₹300-800", "difficulty": "easy", "maxAge": 75, "location": "Historic quarters"},
        {"name": "Heritage Photography", "description": "Capture architectural marvels with professional tips", "duration": "1-3 hours", "cost": "₹100-400", "difficulty": "easy", "maxAge": None, "location": "Monument areas"},
        {"name": "Cultural Immersion Program", "description": "Traditional ceremonies and local customs experience", "duration": "1-2 hours", "cost": "₹300-1200", "difficulty": "easy", "maxAge": None, "location": "Cultural venues"},
    ],
    "beach": [
        {"name": "Water Sports Adventure", "description": "Jet skiing, parasailing, and banana boat rides", "duration": "2-4 hours", "cost": "₹1000-4000", "difficulty": "moderate", "maxAge": 60, "location": "Beach sports center"},
        {"name": "Beach Games Tournament", "description": "Volleyball, frisbee, and other fun beach activities", "duration": "1-2 hours", "cost": "₹200-500", "difficulty": "moderate", "maxAge": 50, "location": "Beach recreation area"},
        {"name": "Sunset Sailing", "description": "Peaceful boat cruise during golden hour", "duration": "2-3 hours", "cost": "₹800-2500", "difficulty": "easy", "maxAge": None, "location": "Harbor marina"},
        {"name": "Fishing Experience", "description": "Traditional or deep-sea fishing with locals", "duration": "3-5 hours", "cost": "₹1500-3000", "difficulty": "easy", "maxAge": 70, "location": "Fishing docks"},
        {"name": "Coastal Photography", "description": "Capture stunning seascapes and marine life", "duration": "2-4 hours", "cost": "₹500-1500", "difficulty": "easy", "maxAge": None, "location": "Scenic coastline"},
    ],
    "mountain": [
        {"name": "Guided Trek", "description": "Nature walks through forest trails with mountain guides", "duration": "4-8 hours", "cost": "₹800-2500", "difficulty": "moderate", "maxAge": 65, "location": "Mountain trails"},
        {"name": "Cable Car Adventure", "description": "Scenic aerial journey with valley views", "duration": "1-2 hours", "cost": "₹300-800", "difficulty": "easy", "maxAge": None, "location": "Cable car station"},
        {"name": "Mountain Biking", "description": "Cycling through scenic mountain roads and trails", "duration": "2-5 hours", "cost": "₹800-2000", "difficulty": "moderate", "maxAge": 55, "location": "Mountain roads"},
        {"name": "Nature Photography", "description": "Capture mountain landscapes and wildlife", "duration": "3-6 hours", "cost": "₹500-1500", "difficulty": "easy", "maxAge": None, "location": "Scenic viewpoints"},
        {"name": "Sunrise Expedition", "description": "Early morning trek to witness spectacular sunrise", "duration": "2-3 hours", "cost": "₹500-1500", "difficulty": "easy", "maxAge": None, "location": "Peak viewpoints"},
    ],
    "adventure": [
        {"name": "White Water Rafting", "description": "Guided rafting run through graded river rapids", "duration": "2-4 hours", "cost": "₹1000-3000", "difficulty": "challenging", "maxAge": 55, "location": "River launch point"},
        {"name": "Tandem Paragliding", "description": "Short tandem flight over the valley with a certified pilot", "duration": "1-2 hours", "cost": "₹2000-4000", "difficulty": "moderate", "maxAge": 60, "location": "Ridge take-off site"},
        {"name": "Day Trek", "description": "Guided hike to a nearby pass or waterfall", "duration": "5-8 hours", "cost": "₹800-2000", "difficulty": "challenging", "maxAge": 60, "location": "Mountain trails"},
        {"name": "Riverside Camping", "description": "Overnight tents with bonfire and local meals", "duration": "Overnight", "cost": "₹1500-3500", "difficulty": "easy", "maxAge": None, "location": "Riverside campsites"},
        {"name": "Village Walk", "description": "Easy walk through nearby villages and orchards", "duration": "2-3 hours", "cost": "₹200-600", "difficulty": "easy", "maxAge": None, "location": "Valley villages"},
    ],
    "modern": [
        {"name": "Desert Safari", "description": "Dune drive, camel ride, and dinner under the stars", "duration": "5-6 hours", "cost": "₹4000-9000", "difficulty": "moderate", "maxAge": 70, "location": "Desert conservation area"},
        {"name": "Marina Dhow Cruise", "description": "Evening cruise with dinner along the waterfront", "duration": "2-3 hours", "cost": "₹2500-6000", "difficulty": "easy", "maxAge": None, "location": "Marina"},
        {"name": "Indoor Theme Park", "description": "Rides and attractions in a climate-controlled park", "duration": "4-6 hours", "cost": "₹5000-8000", "difficulty": "easy", "maxAge": 65, "location": "Entertainment district"},
        {"name": "Architecture Tour", "description": "Guided tour of landmark towers and design districts", "duration": "3-4 hours", "cost": "₹1500-3500", "difficulty": "easy", "maxAge": None, "location": "Downtown"},
        {"name": "Gold and Spice Souk Walk", "description": "Guided walk through traditional market lanes", "duration": "2-3 hours", "cost": "₹800-2000", "difficulty": "easy", "maxAge": None, "location": "Old quarter"},
    ],
}

# ─── Cuisine (keyed by region) ───

REGION_CUISINE: dict[str, list[dict]] = {
    "Odisha": [
        {"dish": "Chhena Poda", "description": "Caramelized cottage cheese dessert, signature sweet of Odisha", "restaurants": "Bikalananda Kar Sweet Shop, Pahala Rajbhog", "price": "₹200-400 per kg", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Dalma", "description": "Traditional lentil curry with mixed vegetables and aromatic spices", "restaurants": "Hare Krishna Restaurant, Kanika Restaurant", "price": "₹80-150", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Machha Jhola", "description": "Spicy fish curry with mustard oil, quintessential Odia dish", "restaurants": "Bhojohori Manna, Dalma Restaurant", "price": "₹150-300", "mustTry": True, "dietaryInfo": "Non-vegetarian"},
        {"dish": "Pitha Platter", "description": "Variety of rice cakes in sweet and savory forms", "restaurants": "Local homes during festivals, Hotel Mayfair", "price": "₹100-250", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Rasgulla", "description": "Soft, spongy cheese balls in sugar syrup, originated in Odisha", "restaurants": "Balaram Mullick & Radharaman Mullick Sweets", "price": "₹200-400 per kg", "mustTry": True, "dietaryInfo": "Vegetarian"},
    ],
    "Telangana": [
        {"dish": "Hyderabadi Biryani", "description": "Aromatic basmati rice layered with marinated meat and spices", "restaurants": "Paradise Biryani, Bawarchi", "price": "₹250-500", "mustTry": True, "dietaryInfo": "Non-vegetarian"},
        {"dish": "Haleem", "description": "Slow-cooked stew of meat, lentils, and wheat, popular during Ramadan", "restaurants": "Pista House, Shah Ghouse Cafe", "price": "₹150-300", "mustTry": True, "dietaryInfo": "Non-vegetarian"},
        {"dish": "Mirchi Ka Salan", "description": "Spicy chili curry in a tangy peanut and sesame sauce", "restaurants": "Shah Ghouse Cafe, Cafe Bahar", "price": "₹100-200", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Double Ka Meetha", "description": "Bread pudding dessert with saffron and dry fruits", "restaurants": "Hotel Shadab, Cafe Bahar", "price": "₹80-150", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Pesarattu", "description": "Green gram crepe served with ginger chutney", "restaurants": "Chutneys, Minerva Coffee Shop", "price": "₹50-100", "mustTry": False, "dietaryInfo": "Vegetarian"},
    ],
    "Maharashtra": [
        {"dish": "Vada Pav", "description": "Spicy potato fritter in a bun, Mumbai's iconic street food", "restaurants": "Ashok Vada Pav, Shivaji Vada Pav", "price": "₹20-50", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Pav Bhaji", "description": "Spiced vegetable mash served with buttered bread rolls", "restaurants": "Sardar Pav Bhaji, Canon Pav Bhaji", "price": "₹100-200", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Misal Pav", "description": "Spicy sprouted lentil curry topped with farsan and served with pav", "restaurants": "Aaswad, Mamledar Misal", "price": "₹100-200", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Bombay Sandwich", "description": "Multi-layered vegetable sandwich with mint chutney", "restaurants": "Kailash Parbat, Cafe Excelsior", "price": "₹50-150", "mustTry": False, "dietaryInfo": "Vegetarian"},
        {"dish": "Modak", "description": "Sweet dumplings filled with coconut and jaggery, favorite of Lord Ganesha", "restaurants": "Chitale Bandhu Mithaiwale, Sweet Bengal", "price": "₹200-400 per dozen", "mustTry": True, "dietaryInfo": "Vegetarian"},
    ],
    "Tamil Nadu": [
        {"dish": "Dosa", "description": "Crispy fermented rice crepe, staple South Indian breakfast", "restaurants": "Sangeetha, Murugan Idli Shop", "price": "₹50-150", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Idli", "description": "Steamed rice cakes served with sambar and chutneys", "restaurants": "Murugan Idli Shop, Ratna Cafe", "price": "₹30-100", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Chettinad Chicken", "description": "Spicy chicken curry with aromatic Chettinad spices", "restaurants": "Anjappar, Buhari Hotel", "price": "₹150-300", "mustTry": True, "dietaryInfo": "Non-vegetarian"},
        {"dish": "Pongal", "description": "Comforting rice and lentil dish flavored with black pepper and cumin", "restaurants": "Sangeetha, Murugan Idli Shop", "price": "₹50-150", "mustTry": False, "dietaryInfo": "Vegetarian"},
        {"dish": "Filter Coffee", "description": "Strong South Indian coffee brewed with chicory and milk", "restaurants": "Cafe Coffee Day, Saravana Bhavan", "price": "₹20-100", "mustTry": True, "dietaryInfo": "Vegetarian"},
    ],
    "Karnataka": [
        {"dish": "Bisi Bele Bath", "description": "Spicy rice and lentil dish with vegetables and tamarind", "restaurants": "MTR, Vidyarthi Bhavan", "price": "₹100-200", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Masala Dosa", "description": "Crispy rice crepe filled with spiced potato masala", "restaurants": "Vidyarthi Bhavan, CTR", "price": "₹50-150", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Ragi Mudde", "description": "Finger millet balls served with spicy sambar or curry", "restaurants": "Local eateries in rural areas", "price": "₹50-100", "mustTry": False, "dietaryInfo": "Vegetarian"},
        {"dish": "Mysore Pak", "description": "Rich sweet made from ghee, sugar, and gram flour", "restaurants": "Guru Sweets, MTR", "price": "₹200-400 per kg", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Coorgi Pandi Curry", "description": "Spicy pork curry from Coorg region", "restaurants": "Coorgi Kitchen, Raintree", "price": "₹200-400", "mustTry": True, "dietaryInfo": "Non-vegetarian"},
    ],
    "West Bengal": [
        {"dish": "Rasgulla", "description": "Soft, spongy cheese balls in sugar syrup, originated in Bengal", "restaurants": "K.C. Das, Balaram Mullick & Radharaman Mullick", "price": "₹200-400 per kg", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Sandesh", "description": "Delicate sweet made from fresh paneer and sugar", "restaurants": "K.C. Das, Bhim Chandra Nag", "price": "₹150-300 per kg", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Mishti Doi", "description": "Sweetened fermented yogurt, a traditional Bengali dessert", "restaurants": "K.C. Das, Balaram Mullick & Radharaman Mullick", "price": "₹50-150", "mustTry": True, "dietaryInfo": "Vegetarian"},
        {"dish": "Shorshe Ilish", "description": "Hilsa fish cooked in mustard gravy, quintessential Bengali dish", "restaurants": "6 Ballygunge Place, Oh! Calcutta", "price": "₹300-600", "mustTry": True, "dietaryInfo": "Non-vegetarian"},
        {"dish": "Chingri Malai Curry", "description": "Prawns cooked in coconut milk with aromatic spices", "restaurants": "Bhojohori Manna, Oh! Calcutta", "price": "₹400-800", "mustTry": True, "dietaryInfo": "Non-vegetarian"},
    ],
}

GENERIC_CUISINE: list[dict] = [
    {"dish": "Local Specialty Dish", "description": "Famous traditional dish from {name}", "restaurants": "Top local restaurants", "price": "₹100-500", "mustTry": True, "dietaryInfo": "Varies"},
    {"dish": "Popular Street Food", "description": "Must-try street food item", "restaurants": "Famous street vendors", "price": "₹20-100", "mustTry": True, "dietaryInfo": "Varies"},
    {"dish": "Traditional Sweet", "description": "Renowned local dessert", "restaurants": "Well-known sweet shops", "price": "₹100-300", "mustTry": True, "dietaryInfo": "Vegetarian"},
    {"dish": "Signature Beverage", "description": "Popular local drink or refreshment", "restaurants": "Cafes and eateries", "price": "₹30-150", "mustTry": False, "dietaryInfo": "Varies"},
    {"dish": "Vegetarian Delight", "description": "Famous vegetarian dish", "restaurants": "Top vegetarian restaurants", "price": "₹100-300", "mustTry": False, "dietaryInfo": "Vegetarian"},
]

# ─── Shopping (keyed by region) ───

REGION_MARKETS: dict[str, list[dict]] = {
    "Odisha": [
        {"market": "Handloom Market", "description": "Traditional handwoven textiles including Sambalpuri sarees and ikat fabrics", "popularItems": "Sarees, dupattas, dress materials", "location": "Unit-III, Bhubaneswar", "operatingHours": "10 AM - 7 PM", "bestTimeToVisit": "Afternoon", "tips": "Bargain for better prices"},
        {"market": "Tribal Handicrafts Market", "description": "Unique tribal crafts like dokra metalwork and terracotta items", "popularItems": "Metal artifacts, pottery, jewelry", "location": "Tribal Museum area, Bhubaneswar", "operatingHours": "10 AM - 6 PM", "bestTimeToVisit": "Morning", "tips": "Look for authentic tribal designs"},
        {"market": "Puri Market", "description": "Vibrant market near Jagannath Temple with religious items and souvenirs", "popularItems": "Religious idols, conch shells, textiles", "location": "Near Jagannath Temple, Puri", "operatingHours": "9 AM - 8 PM", "bestTimeToVisit": "Evening", "tips": "Ideal for temple-related purchases"},
        {"market": "Cuttack Silver Filigree Market", "description": "Famous for intricate silver filigree jewelry and decorative items", "popularItems": "Silver jewelry, home decor", "location": "Cuttack city center", "operatingHours": "10 AM - 6 PM", "bestTimeToVisit": "Afternoon", "tips": "Check for craftsmanship quality"},
        {"market": "Raghurajpur Artist Village", "description": "Living heritage village known for Pattachitra paintings and crafts", "popularItems": "Pattachitra art, masks, dolls", "location": "Raghurajpur, near Puri", "operatingHours": "10 AM - 5 PM", "bestTimeToVisit": "Morning", "tips": "Visit artist workshops for unique pieces"},
    ],
    "Telangana": [
        {"market": "Laad Bazaar", "description": "Famous for traditional bangles, pearls, and bridal jewelry", "popularItems": "Bangles, pearls, jewelry", "location": "Near Charminar, Hyderabad", "operatingHours": "10 AM - 9 PM", "bestTimeToVisit": "Evening", "tips": "Bargain for better deals"},
        {"market": "Shilparamam", "description": "Cultural village showcasing handicrafts from across India", "popularItems": "Handicrafts, textiles, jewelry", "location": "Hitech City, Hyderabad", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Afternoon", "tips": "Great for souvenirs and gifts"},
        {"market": "Koti Sultan Bazaar", "description": "Bustling market for clothes, accessories, and household items", "popularItems": "Clothing, accessories, home goods", "location": "Koti area, Hyderabad", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Morning", "tips": "Explore side lanes for unique finds"},
        {"market": "Begum Bazaar", "description": "One of the largest wholesale markets for spices, dry fruits, and household items", "popularItems": "Spices, dry fruits, kitchenware", "location": "Near Charminar, Hyderabad", "operatingHours": "9 AM - 7 PM", "bestTimeToVisit": "Morning", "tips": "Ideal for bulk purchases"},
        {"market": "Jubilee Hills Road No. 36", "description": "Upscale shopping area with boutiques and designer stores", "popularItems": "Designer clothing, accessories", "location": "Jubilee Hills, Hyderabad", "operatingHours": "11 AM - 9 PM", "bestTimeToVisit": "Afternoon", "tips": "Perfect for high-end shopping"},
    ],
    "Maharashtra": [
        {"market": "Colaba Causeway", "description": "Popular street market for fashion, accessories, and souvenirs", "popularItems": "Clothing, jewelry, handicrafts", "location": "Colaba, Mumbai", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Morning", "tips": "Bargain for better prices"},
        {"market": "Crawford Market", "description": "Historic market for fresh produce, spices, and household items", "popularItems": "Fruits, vegetables, spices", "location": "Fort area, Mumbai", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Morning", "tips": "Great for local food items"},
        {"market": "Fashion Street", "description": "Street market with trendy clothing and accessories at affordable prices", "popularItems": "Clothing, accessories", "location": "MG Road, Mumbai", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Afternoon", "tips": "Ideal for budget shopping"},
        {"market": "Chor Bazaar", "description": "Famous flea market for antiques, vintage items, and curios", "popularItems": "Antiques, vintage goods", "location": "Mahalaxmi area, Mumbai", "operatingHours": "11 AM - 7 PM", "bestTimeToVisit": "Morning", "tips": "Haggle for best deals"},
        {"market": "Pune Central Mall", "description": "Modern shopping mall with national and international brands", "popularItems": "Branded clothing, electronics", "location": "FC Road, Pune", "operatingHours": "10 AM - 10 PM", "bestTimeToVisit": "Evening", "tips": "Look for seasonal sales"},
    ],
    "Tamil Nadu": [
        {"market": "T. Nagar Market", "description": "Bustling shopping district known for silk sarees and gold jewelry", "popularItems": "Silk sarees, gold jewelry", "location": "Thyagaraya Nagar, Chennai", "operatingHours": "10 AM - 9 PM", "bestTimeToVisit": "Morning", "tips": "Bargain for better prices"},
        {"market": "Pondy Bazaar", "description": "Vibrant street market for clothing, accessories, and street food", "popularItems": "Clothing, accessories, street food", "location": "Pondy Bazaar, Chennai", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Afternoon", "tips": "Explore side lanes for unique finds"},
        {"market": "Chennai Silks", "description": "Famous store for silk sarees and traditional attire", "popularItems": "Silk sarees, dress materials", "location": "Multiple locations in Chennai", "operatingHours": "10 AM - 9 PM", "bestTimeToVisit": "Any time", "tips": "Check for festive collections"},
        {"market": "Kanchipuram Handloom Market", "description": "Renowned for authentic Kanchipuram silk sarees", "popularItems": "Kanchipuram sarees, silk fabrics", "location": "Kanchipuram town", "operatingHours": "10 AM - 6 PM", "bestTimeToVisit": "Morning", "tips": "Buy from reputed stores for authenticity"},
        {"market": "Ranganathan Street", "description": "Famous shopping street for clothes, accessories, and electronics", "popularItems": "Clothing, accessories, electronics", "location": "T. Nagar, Chennai", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Afternoon", "tips": "Ideal for budget shopping"},
    ],
    "Karnataka": [
        {"market": "Commercial Street", "description": "Popular shopping area for clothing, accessories, and footwear", "popularItems": "Clothing, shoes, accessories", "location": "Bangalore city center", "operatingHours": "10 AM - 9 PM", "bestTimeToVisit": "Morning", "tips": "Bargain for better deals"},
        {"market": "Chickpet Market", "description": "Historic market known for silk sarees and traditional textiles", "popularItems": "Silk sarees, fabrics", "location": "Chickpet area, Bangalore", "operatingHours": "10 AM - 7 PM", "bestTimeToVisit": "Morning", "tips": "Look for authentic silk products"},
        {"market": "Brigade Road", "description": "Trendy shopping street with branded stores and eateries", "popularItems": "Branded clothing, accessories", "location": "Bangalore city center", "operatingHours": "10 AM - 9 PM", "bestTimeToVisit": "Afternoon", "tips": "Great for youth fashion"},
        {"market": "Mysore Silk Market", "description": "Famous for Mysore silk sarees and garments", "popularItems": "Mysore silk sarees, dress materials", "location": "Mysore city center", "operatingHours": "10 AM - 6 PM", "bestTimeToVisit": "Morning", "tips": "Buy from authorized dealers"},
        {"market": "UB City Mall", "description": "Luxury shopping mall with high-end brands and fine dining", "popularItems": "Designer clothing, accessories", "location": "Bangalore city center", "operatingHours": "10 AM - 10 PM", "bestTimeToVisit": "Evening", "tips": "Look for seasonal sales"},
    ],
    "West Bengal": [
        {"market": "New Market", "description": "Historic market for clothing, accessories, and street food", "popularItems": "Clothing, jewelry, handicrafts", "location": "Esplanade area, Kolkata", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Morning", "tips": "Bargain for better prices"},
        {"market": "Gariahat Market", "description": "Popular shopping area for sarees, jewelry, and home decor", "popularItems": "Sarees, jewelry, home decor", "location": "Gariahat area, Kolkata", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Afternoon", "tips": "Explore side lanes for unique finds"},
        {"market": "Dakshinapan Shopping Complex", "description": "Cultural complex showcasing handicrafts from across India", "popularItems": "Handicrafts, textiles, jewelry", "location": "Dakshinapan area, Kolkata", "operatingHours": "10 AM - 7 PM", "bestTimeToVisit": "Afternoon", "tips": "Great for souvenirs and gifts"},
        {"market": "College Street", "description": "Famous for bookstores and literary shops", "popularItems": "Books, stationery", "location": "College Street area, Kolkata", "operatingHours": "10 AM - 6 PM", "bestTimeToVisit": "Morning", "tips": "Ideal for book lovers"},
        {"market": "South City Mall", "description": "Modern shopping mall with national and international brands", "popularItems": "Branded clothing, electronics", "location": "South City area, Kolkata", "operatingHours": "10 AM - 10 PM", "bestTimeToVisit": "Evening", "tips": "Look for seasonal sales"},
    ],
}

GENERIC_MARKETS: list[dict] = [
    {"market": "Local Handicraft Market", "description": "Market known for traditional crafts and souvenirs from {name}", "popularItems": "Handicrafts, textiles, jewelry", "location": "Central market area", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Morning", "tips": "Bargain for better prices"},
    {"market": "Street Shopping Area", "description": "Vibrant street market for clothing, accessories, and street food", "popularItems": "Clothing, accessories, street food", "location": "Popular shopping street", "operatingHours": "10 AM - 8 PM", "bestTimeToVisit": "Afternoon", "tips": "Explore side lanes for unique finds"},
    {"market": "Modern Shopping Mall", "description": "Contemporary mall with branded stores and eateries", "popularItems": "Branded clothing, electronics", "location": "City center", "operatingHours": "10 AM - 10 PM", "bestTimeToVisit": "Evening", "tips": "Look for seasonal sales"},
    {"market": "Antique and Curio Market", "description": "Flea market for antiques, vintage items, and curios", "popularItems": "Antiques, vintage goods", "location": "Historic market area", "operatingHours": "11 AM - 7 PM", "bestTimeToVisit": "Morning", "tips": "Haggle for best deals"},
    {"market": "Cultural Handicraft Complex", "description": "Cultural complex showcasing handicrafts from various regions", "popularItems": "Handicrafts, textiles, jewelry", "location": "Cultural district", "operatingHours": "10 AM - 7 PM", "bestTimeToVisit": "Afternoon", "tips": "Great for souvenirs and gifts"},
]

# ─── Costs ───

# Daily per-person cost by archetype and accommodation tier (INR)
DAILY_BASE_COSTS: dict[str, dict[str, int]] = {
    "metropolitan": {"budget": 2500, "standard": 4200, "luxury": 7500},
    "heritage": {"budget": 2000, "standard": 3500, "luxury": 6000},
    "beach": {"budget": 2200, "standard": 3800, "luxury": 6800},
    "mountain": {"budget": 1800, "standard": 3200, "luxury": 5500},
    "adventure": {"budget": 2300, "standard": 4000, "luxury": 6500},
    "modern": {"budget": 3000, "standard": 5000, "luxury": 8000},
    "general": {"budget": 2200, "standard": 3800, "luxury": 6200},
}

# Share of the daily figure per budget component
BUDGET_SHARES: dict[str, float] = {
    "accommodation": 0.35,
    "food": 0.30,
    "activities": 0.25,
    "shopping": 0.10,
}

# Flat per-person cost of getting there (INR)
TRANSPORT_COSTS: dict[str, int] = {"flight": 8000, "train": 1500, "bus": 800}

# ─── Lodging and getting around ───

ACCOMMODATION_TIERS: dict[str, str] = {
    "budget": "Budget hotels, hostels, guesthouses (₹800-2000 per night per room)",
    "standard": "Mid-range hotels, service apartments (₹2500-5000 per night per room)",
    "luxury": "Luxury hotels, resorts, heritage properties (₹6000+ per night per room)",
}

ACCOMMODATION_AREAS: dict[str, str] = {
    "beach": "Near beach areas for ocean views",
    "heritage": "Old city or near monuments",
    "mountain": "Hill station center or valley views",
}
DEFAULT_ACCOMMODATION_AREA = "City center for easy access to attractions"

TO_DESTINATION_TRANSPORT: dict[str, str] = {
    "flight": "Fastest option, book 2-3 weeks in advance for better deals",
    "train": "Economical and comfortable, book 4 months in advance when booking opens",
    "bus": "Most budget-friendly, choose AC sleeper for long distances",
}

LOCAL_TRANSPORT: dict[str, str] = {
    "metropolitan": "Metro, buses, taxis, auto-rickshaws, app-based cabs (Uber/Ola)",
    "heritage": "Local buses, cycle rickshaws, walking tours, hired cars",
    "mountain": "Local taxis, shared jeeps, some areas accessible only by foot",
}
DEFAULT_LOCAL_TRANSPORT = "Local buses, auto-rickshaws, rental bikes/cars"

# ─── Tips ───

TRANSPORT_TIPS: dict[str, tuple[str, ...]] = {
    "flight": (
        "Check baggage restrictions and arrive 2-3 hours early for domestic flights",
        "Download airline app for mobile check-in and real-time updates",
    ),
    "train": (
        "Book train tickets in advance, download IRCTC app for easy booking",
        "Carry snacks, water, and entertainment for long train journeys",
    ),
    "bus": (
        "Choose government or reputable private bus operators",
        "Book window seats for better views, carry motion sickness medication",
    ),
}

SENIOR_TIPS = (
    "Consider comprehensive travel insurance for seniors",
    "Pack all regular medications with extra quantity",
    "Keep emergency medical contacts and nearby hospital information",
)
YOUTH_TIPS = (
    "Look for hostels and budget accommodations for cost savings",
    "Use travel apps for discounts and connecting with fellow travelers",
)

ARCHETYPE_TIPS: dict[str, tuple[str, ...]] = {
    "mountain": (
        "Pack warm clothes even in summer, mountain temperatures drop at night",
        "Acclimatize gradually if going to high altitude destinations",
    ),
    "beach": (
        "Pack sunscreen (SPF 30+), hats, and light cotton clothes",
        "Check weather conditions and water safety before swimming",
    ),
    "heritage": (
        "Research historical significance beforehand for better appreciation",
        "Respect photography rules at monuments and religious sites",
    ),
}

GENERAL_TIPS = (
    "Download offline maps (Google Maps/Maps.me) before traveling",
    "Keep digital and physical copies of important documents",
    "Inform your bank about travel dates to avoid card blocks",
)
CLOSING_TIPS = (
    "Keep both cash and cards, some places may not accept digital payments",
    "Save important numbers: hotel, local emergency, travel insurance",
    "Respect local customs and dress codes, especially at religious sites",
)
