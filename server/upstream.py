from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx
import pydantic

from config.settings import DEFAULT_USER_AGENT
from server import contracts
from server.errors import (
    ConfigurationError,
    NotFoundError,
    ParseError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

GEOCODING_COUNTRY = 'Brazil'


class UpstreamService(ABC):
    def __init__(
        self, base_url: str, user_agent: str = DEFAULT_USER_AGENT
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.user_agent = user_agent

    @property
    @abstractmethod
    def name(self) -> str:
        pass  # pragma: no cover

    async def _get(
        self, url: str, params: dict[str, Any] | None = None
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                headers={'User-Agent': self.user_agent}
            ) as client:
                return await client.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.error('%s request failed: %s', self.name, exc)
            raise UpstreamError(f'{self.name} request failed: {exc}') from exc

    def _decode(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.error('%s returned a non-JSON body: %s', self.name, exc)
            raise UpstreamError(
                f'{self.name} returned an invalid body'
            ) from exc

    def _check_status(self, response: httpx.Response) -> None:
        if response.status_code != httpx.codes.OK:
            raise UpstreamError(
                f'{self.name} answered with status {response.status_code}'
            )


class LocationResolver(UpstreamService):
    name = 'ViaCEP'

    async def resolve_location(self, normalized_cep: str) -> str:
        url = f'{self.base_url}/ws/{normalized_cep}/json/'
        logger.debug('Querying ViaCEP: %s', url)

        response = await self._get(url)
        self._check_status(response)
        try:
            address = contracts.ViaCEPAddress.model_validate(
                self._decode(response)
            )
        except pydantic.ValidationError as exc:
            raise UpstreamError('ViaCEP returned an unexpected body') from exc

        if address.erro:
            logger.info('ViaCEP has no entry for %s', normalized_cep)
            raise NotFoundError(f'zipcode {normalized_cep} not found')

        logger.debug('ViaCEP answered %s, %s', address.localidade, address.uf)
        return f'{address.localidade},{address.uf}'


class Geocoder(UpstreamService):
    name = 'Nominatim'

    async def resolve_coordinates(self, location: str) -> contracts.Coordinates:
        url = f'{self.base_url}/search'
        params = {
            'q': f'{location},{GEOCODING_COUNTRY}',
            'format': 'json',
            'limit': 1,
        }
        logger.debug('Querying coordinates: %s q=%s', url, params['q'])

        response = await self._get(url, params=params)
        self._check_status(response)
        try:
            places = pydantic.TypeAdapter(
                list[contracts.NominatimPlace]
            ).validate_python(self._decode(response))
        except pydantic.ValidationError as exc:
            raise UpstreamError(
                'Nominatim returned an unexpected body'
            ) from exc

        if not places:
            raise NotFoundError(f'no coordinates found for {location}')

        try:
            coordinates = contracts.Coordinates(
                lat=float(places[0].lat), lon=float(places[0].lon)
            )
        except ValueError as exc:
            raise ParseError(
                f'invalid coordinates for {location}: '
                f'{places[0].lat!r}, {places[0].lon!r}'
            ) from exc

        logger.debug(
            'Coordinates %.6f, %.6f for %s',
            coordinates.lat,
            coordinates.lon,
            location,
        )
        return coordinates


class WeatherFetcher(UpstreamService):
    name = 'WeatherAPI'

    def __init__(
        self,
        api_key: str | None,
        base_url: str,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        super().__init__(base_url, user_agent)
        self._api_key = api_key

    async def fetch_temperature_by_coordinates(
        self, lat: float, lon: float
    ) -> float:
        if not self._api_key:
            logger.error('WEATHER_API is not configured')
            raise ConfigurationError('WEATHER_API credential not set')

        query = f'{lat:f},{lon:f}'
        params = {'key': self._api_key, 'q': query, 'aqi': 'no'}
        logger.debug('Querying WeatherAPI: q=%s', query)

        response = await self._get(
            f'{self.base_url}/current.json', params=params
        )
        if response.status_code != httpx.codes.OK:
            raise UpstreamError(self._error_message(response))

        try:
            weather = contracts.WeatherAPICurrent.model_validate(
                self._decode(response)
            )
        except pydantic.ValidationError as exc:
            raise UpstreamError(
                'WeatherAPI returned an unexpected body'
            ) from exc

        logger.debug(
            'WeatherAPI returned %.1f°C for %s (%s)',
            weather.current.temp_c,
            weather.location.name,
            query,
        )
        return weather.current.temp_c

    def _error_message(self, response: httpx.Response) -> str:
        message = f'WeatherAPI answered with status {response.status_code}'
        try:
            data = response.json()
        except ValueError:
            return message
        if isinstance(data, dict) and isinstance(data.get('error'), dict):
            detail = data['error'].get('message')
            if detail:
                message = f'{message}: {detail}'
        return message
