"""Unit tests for the ShortURLDynamoDBDAO

Test coverage includes:

1. Insertion behavior
   - Ensures inserts are conditional on the shortcode being unused.
   - Confirms a failed condition raises ShortURLAlreadyExistsError.
   - Confirms other DynamoDB failures raise DataStoreError.
   - Ensures invalid types raise TypeError or BeartypeCallHintParamViolation.

2. Retrieval behavior
   - Ensures fetching an existing shortcode returns a populated ShortURLModel.
   - Confirms missing items raise ShortURLNotFoundError.
   - Confirms DynamoDB failures raise DataStoreError.

3. Existence checks

4. Hit counter operations
   - Ensures hit() uses an atomic ADD guarded by attribute_exists.
   - Confirms missing links raise ShortURLNotFoundError.
   - Confirms DynamoDB failures raise DataStoreError.
"""

import re
from datetime import datetime, UTC
from decimal import Decimal

import pytest
from beartype.roar import BeartypeCallHintParamViolation
from botocore.exceptions import ReadTimeoutError

from dynashort.models import ShortURLModel
from dynashort.dao.base import ShortURLBaseDAO
from dynashort.dao.dynamodb import ShortURLDynamoDBDAO
from dynashort.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError, ShortURLNotFoundError


@pytest.fixture
def dao(table):
    return ShortURLDynamoDBDAO(table=table)


@pytest.fixture
def short_url():
    return ShortURLModel(
        shortcode='Gh71WPTx9',
        target='https://example.com/page',
        domain='short.ly',
        created_at=datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC),
    )


def test_dao_implements_store_interface(dao):
    assert isinstance(dao, ShortURLBaseDAO)


# -------------------------------
# 1. Insertion behavior
# -------------------------------


def test_insert_short_url(dao, table, short_url):
    assert dao.insert(short_url) is dao
    table.put_item.assert_called_once_with(
        Item={
            'shortCode': 'Gh71WPTx9',
            'originalUrl': 'https://example.com/page',
            'domain': 'short.ly',
            'createdAt': '2025-10-15T12:00:00Z',
            'hitCount': 0,
        },
        ConditionExpression='attribute_not_exists(shortCode)',
    )


def test_insert_short_url_which_already_exists(dao, table, short_url, client_error):
    table.put_item.side_effect = client_error('ConditionalCheckFailedException')
    with pytest.raises(ShortURLAlreadyExistsError, match=re.escape("Short URL with code 'Gh71WPTx9' already exists.")):
        dao.insert(short_url)


@pytest.mark.parametrize('code', ['ProvisionedThroughputExceededException', 'ResourceNotFoundException', 'InternalServerError'])
def test_insert_short_url_with_client_error(dao, table, short_url, client_error, code):
    table.put_item.side_effect = client_error(code)
    with pytest.raises(DataStoreError, match=re.escape(f"DynamoDB request to table 'URLMapping-test' failed ({code}).")):
        dao.insert(short_url)


def test_insert_short_url_with_timeout(dao, table, short_url):
    table.put_item.side_effect = ReadTimeoutError(endpoint_url='https://dynamodb.us-east-1.amazonaws.com')
    with pytest.raises(DataStoreError, match="Can't reach DynamoDB table 'URLMapping-test'"):
        dao.insert(short_url)


def test_insert_short_url_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.insert('https://example.com/notamodel')


# -------------------------------
# 2. Retrieval behavior
# -------------------------------


def test_get_short_url(dao, table):
    table.get_item.return_value = {
        'Item': {
            'shortCode': 'Gh71WPTx9',
            'originalUrl': 'https://example.com/page',
            'domain': 'short.ly',
            'createdAt': '2025-10-15T12:00:00Z',
            'hitCount': Decimal('3'),
        }
    }

    short_url = dao.get('Gh71WPTx9')

    table.get_item.assert_called_once_with(Key={'shortCode': 'Gh71WPTx9'}, ConsistentRead=True)
    assert short_url.target == 'https://example.com/page'
    assert short_url.domain == 'short.ly'
    assert short_url.hits == 3


def test_get_short_url_which_does_not_exist(dao, table):
    table.get_item.return_value = {}
    with pytest.raises(ShortURLNotFoundError, match="Short URL with code 'Gh71WPTx9' not found"):
        dao.get('Gh71WPTx9')


def test_get_short_url_with_client_error(dao, table, client_error):
    table.get_item.side_effect = client_error('ProvisionedThroughputExceededException', 'GetItem')
    with pytest.raises(DataStoreError):
        dao.get('Gh71WPTx9')


def test_get_short_url_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.get(12345)


# -------------------------------
# 3. Existence checks
# -------------------------------


@pytest.mark.parametrize('response, expected', [({'Item': {'shortCode': 'Gh71WPTx9'}}, True), ({}, False)])
def test_exists(dao, table, response, expected):
    table.get_item.return_value = response
    assert dao.exists('Gh71WPTx9') is expected
    table.get_item.assert_called_once_with(Key={'shortCode': 'Gh71WPTx9'}, ProjectionExpression='shortCode')


def test_exists_with_client_error(dao, table, client_error):
    table.get_item.side_effect = client_error('InternalServerError', 'GetItem')
    with pytest.raises(DataStoreError):
        dao.exists('Gh71WPTx9')


# -------------------------------
# 4. Hit counter operations
# -------------------------------


def test_hit_increments_atomically(dao, table):
    table.update_item.return_value = {'Attributes': {'hitCount': Decimal('8')}}

    assert dao.hit('Gh71WPTx9') == 8
    table.update_item.assert_called_once_with(
        Key={'shortCode': 'Gh71WPTx9'},
        UpdateExpression='ADD hitCount :inc',
        ConditionExpression='attribute_exists(shortCode)',
        ExpressionAttributeValues={':inc': 1},
        ReturnValues='UPDATED_NEW',
    )
    table.get_item.assert_not_called()
    table.put_item.assert_not_called()


def test_hit_raises_error_when_link_does_not_exist(dao, table, client_error):
    table.update_item.side_effect = client_error('ConditionalCheckFailedException', 'UpdateItem')
    with pytest.raises(ShortURLNotFoundError, match="Short URL with code 'Gh71WPTx9' not found"):
        dao.hit('Gh71WPTx9')


def test_hit_with_client_error(dao, table, client_error):
    table.update_item.side_effect = client_error('ThrottlingException', 'UpdateItem')
    with pytest.raises(DataStoreError, match=re.escape('(ThrottlingException)')):
        dao.hit('Gh71WPTx9')


def test_hit_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.hit([1, 2, 88])
