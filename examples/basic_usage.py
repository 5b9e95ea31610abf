#!/usr/bin/env python3
"""
Basic usage examples for the DynamoDB replication dedupe shim.

This example demonstrates:
1. Setting up configuration
2. Wrapping a boto3 document client
3. Adorned put, update, batch and transactional writes
4. Handler-style invocation
"""

import boto3

from dynamodb_dedupe import (
    DedupeAdorner,
    ReplicationConfig,
    create_logger,
    dedupe_put,
)


def main():
    """Demonstrate basic usage of the dedupe shim."""

    # 1. Configure the replication region
    print("1. Setting up replication configuration...")
    config = ReplicationConfig.from_env()  # Uses AWS_REGION
    logger = create_logger(__name__, config)

    # 2. Wrap the document client attached to a DynamoDB resource
    print("2. Wrapping the DynamoDB document client...")
    client = boto3.resource('dynamodb', region_name=config.region_name).meta.client
    adorner = DedupeAdorner(client, config)

    # 3. Adorned writes
    print("3. Writing adorned items...")
    adorner.put({
        'TableName': 'orders',
        'Item': {'order_id': 'order-001', 'status': 'NEW'},
    })

    adorner.update({
        'TableName': 'orders',
        'Key': {'order_id': 'order-001'},
        'UpdateExpression': 'SET #status = :status',
        'ExpressionAttributeNames': {'#status': 'status'},
        'ExpressionAttributeValues': {':status': 'SHIPPED'},
    })

    adorner.batch_write({
        'RequestItems': {
            'orders': [
                {'PutRequest': {'Item': {'order_id': 'order-002'}}},
                {'DeleteRequest': {'Key': {'order_id': 'order-000'}}},
            ]
        }
    })

    adorner.transact_write({
        'TransactItems': [
            {'Put': {'TableName': 'orders', 'Item': {'order_id': 'order-003'}}},
            {'Delete': {'TableName': 'orders', 'Key': {'order_id': 'order-002'}}},
        ]
    })

    # 4. Handler-style invocation with a single wrapped operation
    print("4. Handler-style put...")

    def on_done(error, result):
        if error:
            logger.error(f"Put failed: {error}")
        else:
            logger.info(f"Put succeeded: {result['ResponseMetadata']['HTTPStatusCode']}")

    put = dedupe_put(client, config)
    put({'TableName': 'orders', 'Item': {'order_id': 'order-004'}}, on_done)


if __name__ == "__main__":
    main()
