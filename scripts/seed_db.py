#!/usr/bin/env python3
"""Load metric definitions and demo providers into the database. Idempotent.

Pass --with-measurements to also add an hour of one-minute demo readings
for each demo provider.
"""

import os
import random
import sys
from datetime import timedelta

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from envmeasure import create_app
from envmeasure.extensions import db
from envmeasure.models.provider import Provider
from envmeasure.services.measurement_store import MeasurementStore
from envmeasure.services.metric_service import MetricService
from envmeasure.utils.hashing import hash_api_key
from envmeasure.utils.timeparse import utcnow

DEMO_PROVIDERS = [
    {
        'id': 'demo-provider-1',
        'name': 'Tokyo Sensor Station',
        'api_key': 'demo_api_key_tokyo',
        'latitude': 35.6762,
        'longitude': 139.6503,
        'address': 'Shinjuku, Tokyo',
        'contact_email': 'tokyo@sensors.example.org',
    },
    {
        'id': 'demo-provider-2',
        'name': 'Osaka Observatory',
        'api_key': 'demo_api_key_osaka',
        'latitude': 34.6937,
        'longitude': 135.5023,
        'address': 'Chuo-ku, Osaka',
        'contact_email': 'osaka@sensors.example.org',
    },
]


def seed_providers():
    """Insert demo providers. Skip existing by id."""
    added = 0
    skipped = 0
    for p in DEMO_PROVIDERS:
        if db.session.get(Provider, p['id']):
            skipped += 1
            continue

        provider = Provider(
            id=p['id'],
            name=p['name'],
            latitude=p['latitude'],
            longitude=p['longitude'],
            address=p['address'],
            contact_email=p['contact_email'],
            api_key_hash=hash_api_key(p['api_key']),
            is_active=True,
        )
        db.session.add(provider)
        added += 1

    db.session.commit()
    print(f"Providers: {added} added, {skipped} skipped (already exist)")


def seed_measurements(minutes=60):
    """One reading per minute over the past hour for each demo provider."""
    store = MeasurementStore()
    now = utcnow().replace(second=0, microsecond=0)
    total = 0
    for p in DEMO_PROVIDERS:
        readings = [
            {
                'timestamp': now - timedelta(minutes=i),
                'temperature': round(15 + random.random() * 10, 1),
                'humidity': round(50 + random.random() * 30, 1),
                'pressure': round(1010 + random.random() * 20, 2),
                'wind_speed': round(random.random() * 10, 2),
                'wind_direction': round(random.random() * 360, 1),
            }
            for i in range(minutes)
        ]
        total += store.insert_batch(p['id'], p['latitude'], p['longitude'], readings)
    print(f"Measurements: {total} added")


if __name__ == '__main__':
    app = create_app()

    with app.app_context():
        print("Seeding database...")
        added = MetricService().seed_defaults()
        print(f"Metrics: {added} added")
        seed_providers()
        if '--with-measurements' in sys.argv[1:]:
            seed_measurements()
        for p in DEMO_PROVIDERS:
            print(f"  {p['name']}: {p['api_key']}")
        print("Done.")
