"""
Replication Marker Adornment

Pure request mutations that stamp DynamoDB write requests with the
``aws:rep:updateregion`` marker used by global tables replication to
recognise writes that already carry a region.

Each routine mutates the request dict in place and returns it:

- adorn_update: UpdateItem params (expression clause, legacy AttributeUpdates)
- adorn_batch_write: BatchWriteItem params (every PutRequest.Item)
- adorn_transact_write: TransactWriteItems params (Put.Item and Update)
- adorn_put: PutItem params (Item)

Passing ``region=None`` leaves the request untouched.
"""

import logging
import re
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

REPLICATION_MARKER_ATTRIBUTE = 'aws:rep:updateregion'

_NON_ALPHANUMERIC = re.compile(r'[^a-zA-Z0-9]')


def marker_alias(attribute_name: str = REPLICATION_MARKER_ATTRIBUTE) -> str:
    """Build the expression placeholder name for an attribute.

    Example:
        >>> marker_alias('aws:rep:updateregion')
        'awsrepupdateregion'
    """
    return _NON_ALPHANUMERIC.sub('', attribute_name)


def mark_item(item: Dict[str, Any], region: str) -> Dict[str, Any]:
    """Set the replication marker on an item, overwriting any existing value."""
    item[REPLICATION_MARKER_ATTRIBUTE] = region
    return item


def adorn_update_expression(params: Dict[str, Any], region: str) -> Dict[str, Any]:
    """
    Append the marker SET term to an update expression.

    Only applies when UpdateExpression is non-empty and the
    ExpressionAttributeNames and ExpressionAttributeValues maps are present
    (empty maps count); otherwise params are left as they are.

    Example:
        'SET #field1 = :field1'
        -> 'SET #field1 = :field1, #awsrepupdateregion = :awsrepupdateregion'
    """
    if not (
        params.get('UpdateExpression')
        and params.get('ExpressionAttributeNames') is not None
        and params.get('ExpressionAttributeValues') is not None
    ):
        logger.debug("Update expression incomplete, skipping replication marker")
        return params

    alias = marker_alias()
    params['UpdateExpression'] += f", #{alias} = :{alias}"
    params['ExpressionAttributeNames'][f"#{alias}"] = REPLICATION_MARKER_ATTRIBUTE
    params['ExpressionAttributeValues'][f":{alias}"] = region
    return params


def adorn_update(params: Dict[str, Any], region: Optional[str]) -> Dict[str, Any]:
    """Adorn UpdateItem params.

    Besides the expression form, the legacy ``AttributeUpdates`` mapping is
    given a PUT action for the marker.
    """
    if region is None:
        return params

    adorn_update_expression(params, region)

    attribute_updates = params.get('AttributeUpdates')
    if attribute_updates is not None:
        attribute_updates[REPLICATION_MARKER_ATTRIBUTE] = {
            'Action': 'PUT',
            'Value': region,
        }
    return params


def adorn_batch_write(params: Dict[str, Any], region: Optional[str]) -> Dict[str, Any]:
    """Adorn BatchWriteItem params.

    DeleteRequest entries carry no item and are left alone.
    """
    if region is None:
        return params

    request_items = params.get('RequestItems') or {}
    for table_name, actions in request_items.items():
        marked = 0
        for action in actions:
            item = (action.get('PutRequest') or {}).get('Item')
            if item is not None:
                mark_item(item, region)
                marked += 1
        logger.debug(f"Marked {marked} put request(s) for {table_name}")
    return params


def adorn_transact_write(params: Dict[str, Any], region: Optional[str]) -> Dict[str, Any]:
    """Adorn TransactWriteItems params.

    Put actions get the marker attribute, Update actions get the marker
    clause; Delete and ConditionCheck actions are untouched.
    """
    if region is None:
        return params

    for action in params.get('TransactItems') or []:
        put_item = (action.get('Put') or {}).get('Item')
        if put_item is not None:
            mark_item(put_item, region)
        elif action.get('Update') is not None:
            adorn_update_expression(action['Update'], region)
    return params


def adorn_put(params: Dict[str, Any], region: Optional[str]) -> Dict[str, Any]:
    """Adorn PutItem params."""
    if region is None:
        return params

    item = params.get('Item')
    if item is not None:
        mark_item(item, region)
    return params
