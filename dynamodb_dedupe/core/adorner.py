"""
Dedupe Adorner

Wraps the write operations of a DynamoDB document client so every request
is stamped with the replication marker before it is sent:

    client = boto3.resource('dynamodb').meta.client
    put = dedupe_put(client)
    put({'TableName': 'orders', 'Item': {'order_id': '42'}})

The wrappers keep the client's calling convention (``**params``) and add an
optional ``callback(error, result)`` for callers that prefer handler style.
Errors raised by the client are never caught or translated when no
callback is supplied.
"""

import inspect
import logging
from typing import Any, Callable, Dict, Optional

from ..config import ReplicationConfig
from ..exceptions import InvalidDelegateError
from .adornment import adorn_batch_write, adorn_put, adorn_transact_write, adorn_update
from .protocols import DocumentClient

logger = logging.getLogger(__name__)

Callback = Callable[[Optional[BaseException], Any], Any]

# operation -> (client method, request mutation)
OPERATIONS = {
    'update': ('update_item', adorn_update),
    'batch_write': ('batch_write_item', adorn_batch_write),
    'transact_write': ('transact_write_items', adorn_transact_write),
    'put': ('put_item', adorn_put),
}


def validate_delegate(db: Optional[DocumentClient], operation: str) -> Callable[..., Any]:
    """Resolve the client method for an operation.

    Args:
        db: Client expected to implement the operation
        operation: One of 'update', 'batch_write', 'transact_write', 'put'

    Returns:
        The bound client method

    Raises:
        InvalidDelegateError: db is None or has no callable method for the operation
    """
    method_name = OPERATIONS[operation][0]
    method = getattr(db, method_name, None) if db is not None else None
    if not callable(method):
        raise InvalidDelegateError(operation, method_name)
    return method


async def _deliver_async(awaitable, callback: Callback) -> Any:
    try:
        result = await awaitable
    except Exception as e:
        callback(e, None)
        return None
    callback(None, result)
    return result


async def _deliver_error_async(error: Exception, callback: Callback) -> None:
    callback(error, None)


def _is_coroutine_method(method: Callable[..., Any]) -> bool:
    return inspect.iscoroutinefunction(method)


def _invoke(method: Callable[..., Any], params: Dict[str, Any], callback: Optional[Callback]) -> Any:
    """Forward params to the client, adapting to handler style when asked.

    With a callback, errors go to the callback and None is returned. Async
    client methods always give back an awaitable, even when they fail
    before producing one.
    """
    if callback is None:
        return method(**params)

    try:
        result = method(**params)
    except Exception as e:
        if _is_coroutine_method(method):
            return _deliver_error_async(e, callback)
        callback(e, None)
        return None

    if inspect.isawaitable(result):
        return _deliver_async(result, callback)

    callback(None, result)
    return result


def _wrap(db: Optional[DocumentClient], operation: str, config: Optional[ReplicationConfig]):
    method = validate_delegate(db, operation)
    method_name, adorn = OPERATIONS[operation]
    if config is None:
        config = ReplicationConfig.from_env()
    region = config.region_name

    def wrapped(params: Dict[str, Any], callback: Optional[Callback] = None) -> Any:
        adorn(params, region)
        logger.debug(f"Forwarding {method_name} (replication region: {region})")
        return _invoke(method, params, callback)

    wrapped.__name__ = f"dedupe_{operation}"
    wrapped.__doc__ = f"Adorn params with the replication marker and call db.{method_name}."
    return wrapped


def dedupe_update(db: DocumentClient, config: Optional[ReplicationConfig] = None):
    """
    Wrap ``db.update_item`` with replication marker adornment.

    DynamoDB Operation: UpdateItem
    The marker SET clause is appended only when UpdateExpression,
    ExpressionAttributeNames and ExpressionAttributeValues are all present.

    Args:
        db: DynamoDB document client
        config: Replication configuration (defaults to environment)

    Returns:
        Function ``(params, callback=None)`` with the client's semantics

    Raises:
        InvalidDelegateError: db does not provide update_item
    """
    return _wrap(db, 'update', config)


def dedupe_batch_write(db: DocumentClient, config: Optional[ReplicationConfig] = None):
    """
    Wrap ``db.batch_write_item`` with replication marker adornment.

    DynamoDB Operation: BatchWriteItem
    Every PutRequest item in every table gets the marker attribute.

    Raises:
        InvalidDelegateError: db does not provide batch_write_item
    """
    return _wrap(db, 'batch_write', config)


def dedupe_transact_write(db: DocumentClient, config: Optional[ReplicationConfig] = None):
    """
    Wrap ``db.transact_write_items`` with replication marker adornment.

    DynamoDB Operation: TransactWriteItems
    Put items get the marker attribute, updates get the marker clause.

    Raises:
        InvalidDelegateError: db does not provide transact_write_items
    """
    return _wrap(db, 'transact_write', config)


def dedupe_put(db: DocumentClient, config: Optional[ReplicationConfig] = None):
    """
    Wrap ``db.put_item`` with replication marker adornment.

    DynamoDB Operation: PutItem

    Raises:
        InvalidDelegateError: db does not provide put_item
    """
    return _wrap(db, 'put', config)


class DedupeAdorner:
    """
    All four adorned write operations bound to one client.

    The client is checked for every operation up front, so a half-capable
    client (e.g. a boto3 Table resource) is rejected at construction.

    Example:
        adorner = DedupeAdorner(boto3.resource('dynamodb').meta.client)
        adorner.transact_write({'TransactItems': [...]})
    """

    def __init__(self, db: DocumentClient, config: Optional[ReplicationConfig] = None):
        """Initialize adorner with client and configuration."""
        if config is None:
            config = ReplicationConfig.from_env()
        self.db = db
        self.config = config
        self.update = dedupe_update(db, config)
        self.batch_write = dedupe_batch_write(db, config)
        self.transact_write = dedupe_transact_write(db, config)
        self.put = dedupe_put(db, config)
