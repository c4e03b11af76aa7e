import io
import logging

from app.logging.logger import Log, _ContextFormatter


class TestContextFormatter:
    def _format(self, **extra: object) -> str:
        record = logging.LogRecord("resume_analyzer", logging.INFO, __file__, 1, "hello", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return _ContextFormatter("%(message)s").format(record)

    def test_plain_message(self) -> None:
        assert self._format() == "hello"

    def test_appends_sorted_context(self) -> None:
        assert self._format(user_id="u1", ats_score=7.0) == "hello | ats_score=7.0 user_id=u1"


class TestLog:
    def test_configure_is_idempotent(self) -> None:
        Log.configure("debug")
        Log.configure("info")
        assert len(Log._logger.handlers) == 1
        assert Log._logger.level == logging.INFO

    def test_writes_context_to_handler(self) -> None:
        Log.configure("info")
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(_ContextFormatter("%(message)s"))
        Log._logger.addHandler(handler)
        try:
            Log.info("Analysis saved", record_id=5)
        finally:
            Log._logger.removeHandler(handler)
        assert stream.getvalue().strip() == "Analysis saved | record_id=5"
