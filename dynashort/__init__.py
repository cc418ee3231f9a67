"""dynashort: short URL service backed by DynamoDB with a Redis cache-aside layer."""

__version__ = '0.1.0'
