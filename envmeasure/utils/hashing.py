import hashlib
import secrets

API_KEY_BYTES = 32


def generate_api_key():
    """Issue a new opaque provider credential (URL-safe, ~43 chars)."""
    return secrets.token_urlsafe(API_KEY_BYTES)


def hash_api_key(api_key):
    """SHA-256 hex digest used to store and look up credentials."""
    return hashlib.sha256(api_key.encode('utf-8')).hexdigest()
