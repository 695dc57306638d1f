import asyncio
from collections.abc import Awaitable, Callable

import click
from dotenv import load_dotenv

from skycast.config import AppConfig, WeatherEnv, load_config
from skycast.controller import QueryController, create_controller
from skycast.report import format_weather_report
from skycast.shared.logging_mixin import configure_logging
from skycast.state import QueryPhase, QueryState


def _render(state: QueryState) -> None:
    if state.phase is QueryPhase.LOADING:
        click.echo(click.style(format_weather_report(state), fg="cyan"))
    elif state.phase is QueryPhase.ERROR:
        click.echo(click.style(format_weather_report(state), fg="red", bold=True))
    elif state.phase is QueryPhase.SUCCESS:
        click.echo(format_weather_report(state))


def _execute(
    ctx: click.Context, action: Callable[[QueryController], Awaitable[QueryState]]
) -> None:
    async def run() -> QueryState:
        controller = create_controller(env=ctx.obj["env"], config=ctx.obj["config"])
        controller.subscribe(_render)
        return await action(controller)

    state = asyncio.run(run())
    if state.phase is QueryPhase.ERROR:
        ctx.exit(1)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file with provider and positioning settings",
)
@click.option("--log-level", default=None, help="Log level for the skycast logger")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, log_level: str | None):
    """Current weather and a 5-day forecast for a city or your location."""
    load_dotenv()
    env = WeatherEnv()
    configure_logging(
        log_level or env.skycast_log_level, stream=click.get_text_stream("stderr")
    )

    try:
        config = load_config(config_path) if config_path else AppConfig()
    except (FileNotFoundError, RuntimeError) as e:
        raise click.ClickException(str(e)) from e

    ctx.obj = {"env": env, "config": config}


@main.command()
@click.argument("name")
@click.pass_context
def city(ctx: click.Context, name: str):
    """Weather for a city by NAME."""
    _execute(ctx, lambda controller: controller.search_city(name))


@main.command()
@click.argument("lat", type=float)
@click.argument("lon", type=float)
@click.pass_context
def coords(ctx: click.Context, lat: float, lon: float):
    """Weather for LAT LON in decimal degrees."""
    _execute(ctx, lambda controller: controller.search_coordinates(lat, lon))


@main.command()
@click.pass_context
def here(ctx: click.Context):
    """Weather for the current location (IP based)."""
    _execute(ctx, lambda controller: controller.search_current_location())


if __name__ == "__main__":
    main()
