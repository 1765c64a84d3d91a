class CEPWeatherError(Exception):
    pass


class ValidationError(CEPWeatherError):
    pass


class NotFoundError(CEPWeatherError):
    pass


class UpstreamError(CEPWeatherError):
    pass


class ParseError(CEPWeatherError):
    pass


class ConfigurationError(CEPWeatherError):
    pass
