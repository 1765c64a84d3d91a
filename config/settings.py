from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = 'cep-weather/1.0'


class AppSetting(BaseSettings):
    log_level: str = 'DEBUG'
    api_prefix: str = ''
    enable_file_logging: bool = False
    log_file_path: str = 'app.log'

    model_config = SettingsConfigDict(env_prefix='APP_')


class ServiceSetting(BaseSettings):
    """Process and upstream configuration, read without a prefix."""

    host: str = '0.0.0.0'
    port: int = 8080
    weather_api: str | None = None
    viacep_url: str = 'https://viacep.com.br'
    nominatim_url: str = 'https://nominatim.openstreetmap.org'
    weatherapi_url: str = 'https://api.weatherapi.com/v1'
    user_agent: str = DEFAULT_USER_AGENT


app_settings = AppSetting()


@lru_cache
def get_service_settings() -> ServiceSetting:
    return ServiceSetting()
