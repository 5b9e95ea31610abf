from .base import DedupeError


class InvalidDelegateError(DedupeError):
    """Raised when the supplied client cannot perform the wrapped write.

    Used for:
    - ``None`` passed instead of a client
    - Clients missing the boto3 method for the operation (e.g. a Table
      resource handed to ``dedupe_batch_write``)
    """

    def __init__(self, operation: str, method_name: str):
        """Initialize invalid delegate error.

        Args:
            operation: Wrapped write operation (e.g., 'batch_write')
            method_name: Client method that was expected (e.g., 'batch_write_item')
        """
        self.operation = operation
        self.method_name = method_name
        message = (
            f"db.{method_name} is not a function. Make sure you pass in a DynamoDB "
            f"document client (boto3.resource(\"dynamodb\").meta.client)"
        )
        context = {
            'operation': operation,
            'method_name': method_name
        }
        super().__init__(message, context)
