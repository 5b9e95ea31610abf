from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DocumentClient(Protocol):
    """Protocol for the DynamoDB client that performs the actual writes.

    ``boto3.resource("dynamodb").meta.client`` satisfies it and accepts plain
    Python values. aioboto3 clients satisfy it too; their methods return
    awaitables.
    """

    def update_item(self, **kwargs) -> Any:  # pragma: no cover - typing helper
        ...

    def batch_write_item(self, **kwargs) -> Any:  # pragma: no cover - typing helper
        ...

    def transact_write_items(self, **kwargs) -> Any:  # pragma: no cover - typing helper
        ...

    def put_item(self, **kwargs) -> Any:  # pragma: no cover - typing helper
        ...
