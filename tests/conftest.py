"""
Test configuration and fixtures for the DynamoDB replication dedupe shim.

Provides echoing document client doubles and a moto-backed DynamoDB resource.
"""

import os
import sys
from pathlib import Path
from unittest.mock import Mock

# Add parent directory to path so we can import dynamodb_dedupe
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from dynamodb_dedupe import ReplicationConfig


def _echo(**kwargs):
    """Return the forwarded request, like a client mocked to echo params."""
    return {'params': kwargs}


@pytest.fixture(autouse=True)
def clear_region(monkeypatch):
    """Start every test without a region in the environment."""
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("DYNAMODB_DEBUG_LOGGING", raising=False)


@pytest.fixture
def document_client():
    """Mock document client whose write methods echo their params."""
    client = Mock()
    client.update_item.side_effect = _echo
    client.batch_write_item.side_effect = _echo
    client.transact_write_items.side_effect = _echo
    client.put_item.side_effect = _echo
    return client


@pytest.fixture
def no_region_config():
    """Configuration with replication adornment disabled."""
    return ReplicationConfig.disabled()


@pytest.fixture
def aws_credentials(monkeypatch):
    """Mocked AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def mock_dynamodb_resource(aws_credentials):
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def orders_table(mock_dynamodb_resource):
    """Create a simple hash-key table for testing."""
    table = mock_dynamodb_resource.create_table(
        TableName='test_orders',
        KeySchema=[
            {'AttributeName': 'order_id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'order_id', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )
    table.wait_until_exists()
    return table
