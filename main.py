import asyncio

from skycast import QueryState, create_controller, format_weather_report


def render(state: QueryState) -> None:
    print(format_weather_report(state))
    print()


async def main():
    try:
        controller = create_controller()
        controller.subscribe(render)

        await controller.search_city("Paris")
        await controller.search_current_location()

    except KeyboardInterrupt:
        pass
    except Exception:
        print("Critical application error")
        raise


if __name__ == "__main__":
    asyncio.run(main())
