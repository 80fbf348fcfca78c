"""Weather data models."""
from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    """Geographic position in degrees."""

    lat: float = Field(..., allow_inf_nan=False)
    lon: float = Field(..., allow_inf_nan=False)


class WeatherReport(BaseModel):
    """Current weather for a city, normalized from the provider payload."""

    city: str = Field(..., description="City name as resolved by the provider")
    country: str = Field(default="", description="ISO 3166 country code")
    coords: Coordinates
    temperature: float = Field(..., description="Temperature in Celsius")
    feels_like: float = Field(..., description="Perceived temperature in Celsius")
    description: str = Field(default="", description="Textual condition description")
    icon: str = Field(default="", description="Provider icon identifier")
    humidity: float = Field(..., description="Relative humidity in percent")
    pressure: float = Field(..., description="Atmospheric pressure in hPa")
    wind_speed: float = Field(..., description="Wind speed in m/s")
    rain_3h: float = Field(default=0, description="Rainfall over the last 3 hours in mm")

    class Config:
        json_schema_extra = {
            "example": {
                "city": "Paris",
                "country": "FR",
                "coords": {"lat": 48.8534, "lon": 2.3488},
                "temperature": 14.2,
                "feels_like": 13.1,
                "description": "light rain",
                "icon": "10d",
                "humidity": 81,
                "pressure": 1012,
                "wind_speed": 4.1,
                "rain_3h": 0.6,
            }
        }
