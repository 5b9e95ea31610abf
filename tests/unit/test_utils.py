import logging

from dynamodb_dedupe import DedupeError, InvalidDelegateError, ReplicationConfig, create_logger


class TestCreateLogger:
    """Test cases for create_logger."""

    def test_debug_logging_enabled(self):
        config = ReplicationConfig(region_name="us-east-1", enable_debug_logging=True)

        logger = create_logger("dynamodb_dedupe.tests.debug", config)

        assert logger.name == "dynamodb_dedupe.tests.debug"
        assert logger.level == logging.DEBUG

    def test_level_left_alone_without_debug(self):
        logger = create_logger("dynamodb_dedupe.tests.quiet", ReplicationConfig())

        assert logger.level == logging.NOTSET

    def test_reads_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("DYNAMODB_DEBUG_LOGGING", "TRUE")

        logger = create_logger("dynamodb_dedupe.tests.env")

        assert logger.level == logging.DEBUG


class TestExceptions:
    """Test exception formatting."""

    def test_invalid_delegate_is_dedupe_error(self):
        error = InvalidDelegateError("put", "put_item")

        assert isinstance(error, DedupeError)
        assert error.operation == "put"
        assert repr(error).startswith("InvalidDelegateError(message='db.put_item is not a function.")
        assert repr(error).endswith("context={'operation': 'put', 'method_name': 'put_item'})")

    def test_invalid_delegate_context_rendered_in_str(self):
        error = InvalidDelegateError("batch_write", "batch_write_item")

        assert str(error).startswith("db.batch_write_item is not a function.")
        assert str(error).endswith("(Context: operation=batch_write, method_name=batch_write_item)")

    def test_no_context_leaves_message_alone(self):
        error = DedupeError("failed")

        assert str(error) == "failed"
        assert error.context == {}
