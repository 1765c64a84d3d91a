KELVIN_OFFSET = 273


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    # integer offset, not 273.15
    return celsius + KELVIN_OFFSET
