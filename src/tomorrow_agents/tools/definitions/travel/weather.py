import logging

import httpx
from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_factory.weather.open_meteo import (
    LocationNotFoundError,
    OpenMeteoClient,
)
from tomorrow_agents.tools.tool_models import ToolSpec

logger = logging.getLogger(__name__)


class WeatherInput(BaseModel):
    location: str = Field(description="City name, in English, e.g. 'Lisbon' or 'New York'.")


def build_weather(context: ToolContext) -> StructuredTool:
    client = OpenMeteoClient(context.settings)

    def _run(location: str) -> dict:
        try:
            with context.telemetry.track_weather_api_call(location):
                report = client.current_weather(location)
        except LocationNotFoundError as exc:
            return {"error": str(exc)}
        except httpx.HTTPError as exc:
            logger.warning("Weather lookup for %s failed: %s", location, exc)
            return {"error": f"Weather service unavailable: {exc}"}
        return report.model_dump()

    return StructuredTool.from_function(
        name="weather",
        description="Get current weather for a location to plan travel activities",
        func=_run,
        args_schema=WeatherInput,
    )


tool = ToolSpec(
    name="weather",
    builder=build_weather,
    intent="Fetch current conditions so recommendations can match the weather.",
    schema_notes=(
        "Takes 'location'. Returns temperature, feels_like, humidity, wind_speed, "
        "wind_gust, conditions and the resolved location name, or 'error'."
    ),
)
