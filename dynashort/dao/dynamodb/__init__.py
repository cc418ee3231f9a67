from dynashort.dao.dynamodb.mixins import DynamoDBClientMixin
from dynashort.dao.dynamodb.short_url_dynamodb_dao import ShortURLDynamoDBDAO


__all__ = [
    'DynamoDBClientMixin',
    'ShortURLDynamoDBDAO',
]
