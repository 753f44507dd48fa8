import io
import sys

from loguru import logger

from controlbinding.core.config import BindingSettings
from controlbinding.core.logging import setup_logging


def test_file_sink_receives_binding_diagnostics(tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(debug_mode=False, log_dir=str(log_dir))
    try:
        logger.warning("Invalid binding mode 'Sideways'")
        logger.complete()

        files = list(log_dir.glob("binding_*.log"))
        assert len(files) == 1
        assert "Invalid binding mode" in files[0].read_text(encoding="utf-8")
    finally:
        setup_logging(debug_mode=True)


def test_console_level_from_settings(monkeypatch):
    console = io.StringIO()
    monkeypatch.setattr(sys, "stderr", console)
    setup_logging(log_level=BindingSettings(log_level="warning").log_level)
    try:
        logger.info("Bound QSlider.value to 'health'")
        logger.warning("Binding QLabel.text skipped")
        logger.complete()

        output = console.getvalue()
        assert "Binding QLabel.text skipped" in output
        assert "Bound QSlider.value" not in output
    finally:
        monkeypatch.undo()
        setup_logging(debug_mode=True)
