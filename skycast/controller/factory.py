import aiohttp

from skycast.config import AppConfig, WeatherEnv
from skycast.controller.controller import QueryController
from skycast.events import EventBus
from skycast.location import IpApiPositionProvider, PositionProvider
from skycast.weather import WeatherClient


def create_controller(
    env: WeatherEnv | None = None,
    config: AppConfig | None = None,
    session: aiohttp.ClientSession | None = None,
    position_provider: PositionProvider | None = None,
    event_bus: EventBus | None = None,
) -> QueryController:
    """
    Build a QueryController with its collaborators.

    The API key is read from the environment exactly once, here. A missing
    key is not an error at this point; queries will end in MissingCredential.
    """
    env = env or WeatherEnv()
    config = config or AppConfig()

    if position_provider is None and config.positioning.enabled:
        position_provider = IpApiPositionProvider(config.positioning, session=session)

    client = WeatherClient(
        api_key=env.openweather_api_key,
        settings=config.provider,
        session=session,
    )
    return QueryController(
        weather_client=client,
        position_provider=position_provider,
        event_bus=event_bus,
    )
