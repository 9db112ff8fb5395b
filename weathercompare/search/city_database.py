"""Static city-name lookup used for autocomplete suggestions."""

from weathercompare.config.defaults import DEFAULT_MAX_SUGGESTIONS

CITIES: tuple[str, ...] = (
    "Abu Dhabi", "Accra", "Addis Ababa", "Adelaide", "Ahmedabad", "Algiers",
    "Almaty", "Amman", "Amsterdam", "Ankara", "Antwerp", "Athens", "Atlanta",
    "Auckland", "Austin", "Baghdad", "Baku", "Baltimore", "Bangalore",
    "Bangkok", "Barcelona", "Beijing", "Beirut", "Belfast", "Belgrade",
    "Berlin", "Bern", "Bogota", "Boston", "Brasilia", "Bratislava",
    "Brisbane", "Brussels", "Bucharest", "Budapest", "Buenos Aires", "Cairo",
    "Calgary", "Cape Town", "Caracas", "Casablanca", "Chennai", "Chicago",
    "Copenhagen", "Dakar", "Dallas", "Damascus", "Dar es Salaam", "Delhi",
    "Denver", "Detroit", "Dhaka", "Doha", "Dubai", "Dublin", "Durban",
    "Edinburgh", "Frankfurt", "Geneva", "Glasgow", "Guadalajara",
    "Guangzhou", "Hamburg", "Hanoi", "Havana", "Helsinki", "Ho Chi Minh City",
    "Hong Kong", "Honolulu", "Houston", "Hyderabad", "Istanbul", "Jakarta",
    "Jerusalem", "Johannesburg", "Kabul", "Karachi", "Kathmandu", "Kiev",
    "Kolkata", "Kuala Lumpur", "Kyoto", "Lagos", "Lahore", "Las Vegas",
    "Lima", "Lisbon", "Ljubljana", "London", "Los Angeles", "Lyon",
    "Madrid", "Manchester", "Manila", "Marseille", "Melbourne",
    "Mexico City", "Miami", "Milan", "Minneapolis", "Minsk", "Montreal",
    "Moscow", "Mumbai", "Munich", "Nairobi", "Naples", "New Orleans",
    "New York", "Nice", "Osaka", "Oslo", "Ottawa", "Panama City", "Paris",
    "Perth", "Philadelphia", "Phoenix", "Portland", "Porto", "Prague",
    "Quito", "Reykjavik", "Riga", "Rio de Janeiro", "Riyadh", "Rome",
    "Rotterdam", "Saint Petersburg", "Salt Lake City", "San Diego",
    "San Francisco", "San Jose", "Santiago", "Sao Paulo", "Sarajevo",
    "Seattle", "Seoul", "Seville", "Shanghai", "Shenzhen", "Singapore",
    "Sofia", "Stockholm", "Sydney", "Taipei", "Tallinn", "Tashkent",
    "Tbilisi", "Tehran", "Tel Aviv", "Tokyo", "Toronto", "Tunis", "Valencia",
    "Vancouver", "Venice", "Vienna", "Vilnius", "Warsaw", "Washington",
    "Wellington", "Yerevan", "Zagreb", "Zurich",
)


def search_cities(
    query: str,
    limit: int = DEFAULT_MAX_SUGGESTIONS,
    cities: tuple[str, ...] = CITIES,
) -> list[str]:
    """Case-insensitive suggestions for a partial city name.

    Prefix matches come first, then matches at the start of a later word,
    then any other substring match. Each group keeps list order.
    """
    needle = query.strip().lower()
    if not needle:
        return []

    prefix: list[str] = []
    word_start: list[str] = []
    substring: list[str] = []
    for name in cities:
        lowered = name.lower()
        if lowered.startswith(needle):
            prefix.append(name)
        elif any(word.startswith(needle) for word in lowered.split()[1:]):
            word_start.append(name)
        elif needle in lowered:
            substring.append(name)

    return (prefix + word_start + substring)[:limit]
