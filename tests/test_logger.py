import logging

from spotnav.utils.logger import setup_logger


def test_setup_logger_writes_file_once(tmp_path) -> None:
    log_file = tmp_path / "logs" / "sim.log"
    log = setup_logger("spotnav.test_file", str(log_file), level=logging.DEBUG, console=False)
    again = setup_logger("spotnav.test_file", str(log_file), console=False)
    assert again is log
    assert len(log.handlers) == 1
    log.info("goal reached")
    for h in log.handlers:
        h.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "spotnav.test_file - INFO - goal reached" in text
