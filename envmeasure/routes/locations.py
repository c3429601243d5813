from flask import Blueprint, request
from envmeasure.errors import MissingQuery
from envmeasure.integrations.openweather import LocationSearchClient
from envmeasure.routes import success

locations_bp = Blueprint('locations', __name__)


@locations_bp.route('/locations/search')
def search_locations():
    query = (request.args.get('query') or '').strip()
    if not query:
        raise MissingQuery()

    locations = LocationSearchClient().search(query)
    return success({'locations': locations})
