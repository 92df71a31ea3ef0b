"""Basic usage examples for the weatherhub client."""

import asyncio

from weatherhub import Credentials, NoProviderAvailable, WeatherAggregationService


async def main() -> None:
    # Keys come from WEATHERHUB_PRIMARY_KEY / WEATHERHUB_FALLBACK_KEY
    async with WeatherAggregationService(Credentials.from_env()) as weather:
        print("=== Location search ===")
        places = await weather.search_locations("Paris")
        for p in places:
            print(f"  {p.name}, {p.country} ({p.lat:.2f}, {p.lon:.2f})")

        lat, lon = (places[0].lat, places[0].lon) if places else (48.85, 2.35)

        try:
            report = await weather.get_full_report(lat, lon, days=5)
        except NoProviderAvailable as exc:
            print(f"\nNo current conditions: {exc}")
            return

        now = report.current
        print(f"\n=== Now in {now.location_label} ===")
        print(f"  {now.glyph} {now.condition}, {now.temperature_c}°C")
        print(f"  Humidity: {now.humidity_pct}%, Wind: {now.wind_speed_mph} mph")
        print(f"  UV: {report.uv_index}, AQI: {report.air_quality.aqi}")

        print("\n=== Forecast ===")
        for day in report.forecast:
            print(
                f"  {day.date}: {day.glyph} {day.condition} "
                f"{day.low_c}..{day.high_c}°C, {day.precipitation_mm} mm"
            )


if __name__ == "__main__":
    asyncio.run(main())
