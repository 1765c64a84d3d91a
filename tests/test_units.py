import pytest

from server.cep import is_valid_cep, normalize_cep, validate_cep
from server.conversions import celsius_to_fahrenheit, celsius_to_kelvin
from server.errors import ValidationError


@pytest.mark.parametrize(
    "value",
    ["01310100", "01310-100", "01310.100", "01310 100", " 0-1.3 1 0-1.0 0 "],
)
def test_valid_cep(value):
    assert is_valid_cep(value)
    assert normalize_cep(value) == "01310100"
    assert validate_cep(value) == "01310100"


@pytest.mark.parametrize(
    "value",
    ["", "123", "abcdefgh", "0131010", "013101000", "cep: 0131-010", "٠١٣١٠١٠٠"],
)
def test_invalid_cep(value):
    assert not is_valid_cep(value)
    with pytest.raises(ValidationError):
        validate_cep(value)


@pytest.mark.parametrize(
    "celsius, fahrenheit",
    [(0, 32), (100, 212), (-40, -40)],
)
def test_celsius_to_fahrenheit(celsius, fahrenheit):
    assert celsius_to_fahrenheit(celsius) == fahrenheit


@pytest.mark.parametrize(
    "celsius, kelvin",
    [(0, 273), (100, 373), (-40, 233)],
)
def test_celsius_to_kelvin(celsius, kelvin):
    assert celsius_to_kelvin(celsius) == kelvin
