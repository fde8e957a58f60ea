"""Tests for the Loguru setup."""

from app.config.logger import LoguruConfig, app_logger, log_performance, loguru_config
from app.config.settings import settings


class TestLoguruConfig:
    """Test which log files the application writes."""

    def test_file_sinks_in_configured_directory(self, tmp_path):
        logs_dir = tmp_path / "logs"
        config = LoguruConfig(logs_dir=str(logs_dir))
        try:
            config.setup_logger(log_level="DEBUG")
            log_performance("recommend", 0.0012, matches=1)
            app_logger.info("REQUEST START: GET /status")
            app_logger.complete()

            names = sorted(path.name for path in logs_dir.iterdir())
            assert names == ["app.log", "performance.log", "requests.log"]
            assert "PERFORMANCE: recommend" in (logs_dir / "performance.log").read_text(encoding="utf-8")
            assert "REQUEST START" not in (logs_dir / "performance.log").read_text(encoding="utf-8")
            assert "REQUEST START" in (logs_dir / "requests.log").read_text(encoding="utf-8")
        finally:
            loguru_config.setup_logger(log_level=settings.LOG_LEVEL)
