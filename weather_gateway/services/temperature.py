"""Temperature conversion and categorization."""

FREEZING = "Freezing"
COLD = "Cold"
COOL = "Cool"
MILD = "Mild"
WARM = "Warm"
HOT = "Hot"

TEMPERATURE_CATEGORIES = (FREEZING, COLD, COOL, MILD, WARM, HOT)


def convert_to_fahrenheit(temp: float, unit: str) -> float:
    """
    Convert a temperature reported in an OpenWeatherMap unit to Fahrenheit.

    "metric" is Celsius and "standard" is Kelvin. Any other unit (including
    "imperial") is assumed to be Fahrenheit already and returned unchanged.
    """
    if unit == "metric":
        return temp * 9 / 5 + 32
    if unit == "standard":
        return (temp - 273.15) * 9 / 5 + 32
    return temp


def categorize_temperature(temp_fahrenheit: float) -> str:
    """Map a Fahrenheit temperature to a human-readable category.

    Upper bounds are inclusive: 32 is Freezing, 50 is Cold, 95 is Warm.
    """
    if temp_fahrenheit <= 32:
        return FREEZING
    if temp_fahrenheit <= 50:
        return COLD
    if temp_fahrenheit <= 68:
        return COOL
    if temp_fahrenheit <= 77:
        return MILD
    if temp_fahrenheit <= 95:
        return WARM
    return HOT
