from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from config.settings import ServiceSetting, get_service_settings
from server import contracts
from server.cep import validate_cep
from server.conversions import celsius_to_fahrenheit, celsius_to_kelvin
from server.errors import CEPWeatherError, ValidationError
from server.upstream import Geocoder, LocationResolver, WeatherFetcher

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_ZIPCODE = "invalid zipcode"
ZIPCODE_NOT_FOUND = "can not find zipcode"
TEMPERATURE_ERROR = "error getting temperature, "


def get_location_resolver(
    settings: ServiceSetting = Depends(get_service_settings),
) -> LocationResolver:
    return LocationResolver(settings.viacep_url, settings.user_agent)


def get_geocoder(
    settings: ServiceSetting = Depends(get_service_settings),
) -> Geocoder:
    return Geocoder(settings.nominatim_url, settings.user_agent)


def get_weather_fetcher(
    settings: ServiceSetting = Depends(get_service_settings),
) -> WeatherFetcher:
    return WeatherFetcher(
        settings.weather_api, settings.weatherapi_url, settings.user_agent
    )


@router.get(
    "/{cep}",
    response_model=contracts.TemperatureResponse,
    responses={
        404: {"model": contracts.ErrorResponse},
        422: {"model": contracts.ErrorResponse},
        500: {"model": contracts.ErrorResponse},
    },
)
async def get_temperature(
    cep: str,
    location_resolver: LocationResolver = Depends(get_location_resolver),
    geocoder: Geocoder = Depends(get_geocoder),
    weather_fetcher: WeatherFetcher = Depends(get_weather_fetcher),
) -> contracts.TemperatureResponse:
    logger.info("Looking up CEP %s", cep)

    try:
        normalized_cep = validate_cep(cep)
    except ValidationError as exc:
        logger.info("Invalid CEP: %s", cep)
        raise HTTPException(status_code=422, detail=INVALID_ZIPCODE) from exc

    try:
        location = await location_resolver.resolve_location(normalized_cep)
    except CEPWeatherError as exc:
        logger.info("CEP %s not resolved: %s", normalized_cep, exc)
        raise HTTPException(status_code=404, detail=ZIPCODE_NOT_FOUND) from exc

    logger.info("Location found: %s", location)

    # the weather call still goes out at (0, 0) when geocoding fails
    try:
        coordinates = await geocoder.resolve_coordinates(location)
    except CEPWeatherError as exc:
        logger.warning("Could not geocode %s: %s", location, exc)
        coordinates = contracts.Coordinates(lat=0.0, lon=0.0)

    try:
        temp_c = await weather_fetcher.fetch_temperature_by_coordinates(
            coordinates.lat, coordinates.lon
        )
    except CEPWeatherError as exc:
        logger.error("Could not get temperature for %s: %s", location, exc)
        raise HTTPException(
            status_code=500, detail=f"{TEMPERATURE_ERROR}{exc}"
        ) from exc

    temperature = contracts.TemperatureResponse(
        temp_C=temp_c,
        temp_F=celsius_to_fahrenheit(temp_c),
        temp_K=celsius_to_kelvin(temp_c),
    )
    logger.info(
        "Temperatures for %s - C: %.1f, F: %.1f, K: %.1f",
        location,
        temperature.temp_C,
        temperature.temp_F,
        temperature.temp_K,
    )
    return temperature
