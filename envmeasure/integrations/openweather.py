import logging
import requests
from flask import current_app
from envmeasure.errors import LocationNotFound

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://api.openweathermap.org/data/2.5'


class LocationSearchClient:
    """Resolves a free-text place name to coordinates via OpenWeatherMap."""

    def __init__(self, app_config=None):
        config = app_config or current_app.config
        self.api_key = config.get('OPENWEATHER_API_KEY')
        self.base_url = config.get('OPENWEATHER_BASE_URL', DEFAULT_BASE_URL)
        self.timeout = config.get('OUTBOUND_TIMEOUT_SECONDS', 10)

    def search(self, query):
        """Returns [{name, latitude, longitude, country}]. Raises LocationNotFound."""
        if not self.api_key:
            logger.warning("Location search requested but OPENWEATHER_API_KEY is not set")
            raise LocationNotFound()

        try:
            resp = requests.get(
                f'{self.base_url}/weather',
                params={'q': query, 'appid': self.api_key, 'units': 'metric'},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
            return [{
                'name': data['name'],
                'latitude': data['coord']['lat'],
                'longitude': data['coord']['lon'],
                'country': data.get('sys', {}).get('country'),
            }]
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.info(f"Location search failed for {query!r}: {e}")
            raise LocationNotFound()
