import json
import logging

import pytest

from plagiarism_checker.core.logging_config import LoggerMixin, StructuredFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class Worker(LoggerMixin):
    def run(self, fail=False):
        with self.log_operation("work", algorithm="kmp") as operation:
            if fail:
                raise RuntimeError("failed")
        return operation


def test_structured_formatter_includes_extras():
    record = logging.LogRecord("engine", logging.INFO, __file__, 10, "Completed café", None, None)
    record.operation = "compare_documents"
    record.matches = 3

    payload = json.loads(StructuredFormatter().format(record))

    assert payload['message'] == "Completed café"
    assert payload['level'] == "INFO"
    assert payload['operation'] == "compare_documents"
    assert payload['matches'] == 3
    assert payload['timestamp'].endswith("Z")


def test_logger_mixin_names_logger_after_class():
    assert Worker().logger.name == f"{__name__}.Worker"


def test_log_operation_records_duration(caplog):
    with caplog.at_level(logging.INFO):
        operation = Worker().run()

    assert operation.duration is not None and operation.duration >= 0
    record = [r for r in caplog.records if r.getMessage() == "Completed operation: work"][0]
    assert record.algorithm == "kmp"
    assert record.duration == operation.duration


def test_log_operation_logs_failures(caplog):
    with pytest.raises(RuntimeError):
        Worker().run(fail=True)

    assert "Failed operation: work" in caplog.text


def test_setup_logging_writes_files(tmp_path, restore_root_logger):
    setup_logging(log_level="DEBUG", log_dir=str(tmp_path / "logs"), enable_console=False)
    logging.getLogger("plagiarism_checker.test").warning("something odd")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "something odd" in (tmp_path / "logs" / "app.log").read_text(encoding="utf-8")
    assert "something odd" in (tmp_path / "logs" / "errors.log").read_text(encoding="utf-8")
