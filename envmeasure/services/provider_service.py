import logging
from envmeasure.errors import InvalidApiKey, InvalidLocation, InvalidRadius, MissingLocation, Unauthorized
from envmeasure.extensions import db
from envmeasure.models.provider import Provider
from envmeasure.schemas import ProviderRegistrationIn, validate_payload
from envmeasure.utils.geo import distance, parse_location, parse_radius, round_distance
from envmeasure.utils.hashing import generate_api_key, hash_api_key

logger = logging.getLogger(__name__)

DEFAULT_NEARBY_RADIUS = 10


class ProviderService:
    def register(self, payload):
        """
        Register a provider and issue its API key.
        The plaintext key is only ever returned here; the store keeps its hash.
        """
        data = validate_payload(ProviderRegistrationIn, payload)
        api_key = generate_api_key()

        provider = Provider(
            name=data.name,
            description=data.description,
            latitude=data.location.latitude,
            longitude=data.location.longitude,
            address=data.location.address,
            contact_email=str(data.contact) if data.contact else None,
            api_key_hash=hash_api_key(api_key),
            is_active=True,
        )
        db.session.add(provider)
        db.session.commit()

        logger.info(f"Registered provider {provider.id} ({provider.name})")
        return {
            'id': provider.id,
            'api_key': api_key,
            'message': 'Provider registered successfully',
        }

    def find_nearby(self, location=None, radius=None):
        """Active providers within radius of "lat,lon", nearest first."""
        if not location:
            raise MissingLocation()
        try:
            lat, lon = parse_location(location)
        except ValueError:
            raise InvalidLocation()
        try:
            radius = parse_radius(radius, DEFAULT_NEARBY_RADIUS)
        except ValueError:
            raise InvalidRadius()

        candidates = []
        for provider in Provider.query.filter_by(is_active=True).all():
            dist = distance(provider.latitude, provider.longitude, lat, lon)
            if dist <= radius:
                candidates.append((dist, provider))
        candidates.sort(key=lambda item: item[0])

        return [
            {
                'id': p.id,
                'name': p.name,
                'description': p.description,
                'location': p.location_dict(),
                'distance': round_distance(dist),
            }
            for dist, p in candidates
        ]

    def authenticate(self, api_key):
        """Resolve a bearer token to an active Provider."""
        if not api_key:
            raise Unauthorized()

        provider = Provider.query.filter_by(
            api_key_hash=hash_api_key(api_key), is_active=True,
        ).first()
        if not provider:
            logger.warning("Rejected measurement upload with unknown or inactive API key")
            raise InvalidApiKey()
        return provider
