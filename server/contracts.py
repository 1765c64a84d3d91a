from typing import NamedTuple

from pydantic import BaseModel, ConfigDict


class Coordinates(NamedTuple):
    lat: float
    lon: float


class TemperatureResponse(BaseModel):
    temp_C: float
    temp_F: float
    temp_K: float


class ErrorResponse(BaseModel):
    error: str


class ViaCEPAddress(BaseModel):
    model_config = ConfigDict(extra='ignore')

    localidade: str = ''
    uf: str = ''
    cep: str | None = None
    logradouro: str | None = None
    complemento: str | None = None
    bairro: str | None = None
    ibge: str | None = None
    gia: str | None = None
    ddd: str | None = None
    siafi: str | None = None
    erro: bool = False


class NominatimPlace(BaseModel):
    model_config = ConfigDict(extra='ignore')

    lat: str
    lon: str


class WeatherLocation(BaseModel):
    name: str = ''


class CurrentConditions(BaseModel):
    temp_c: float


class WeatherAPICurrent(BaseModel):
    model_config = ConfigDict(extra='ignore')

    location: WeatherLocation = WeatherLocation()
    current: CurrentConditions
