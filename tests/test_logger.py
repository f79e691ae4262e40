import logging

from loguru import logger

from barbershop.core.logger import setup_logging


def test_stdlib_logging_reaches_loguru(tmp_path):
    error_log = tmp_path / "errors.log"
    setup_logging(level="DEBUG", error_log=str(error_log))
    messages = []
    sink_id = logger.add(messages.append, level="INFO", format="{level}|{message}")

    try:
        logging.getLogger("barbershop").warning("store slow")
        logging.getLogger("barbershop").error("store down")
        logging.getLogger("uvicorn.access").info("GET /api/bookings 200")
    finally:
        logger.remove(sink_id)

    lines = [m.strip() for m in messages]
    assert "WARNING|store slow" in lines
    assert "ERROR|store down" in lines
    assert not any("GET /api/bookings" in m for m in lines)

    logger.complete()
    assert "store down" in error_log.read_text()
    assert "store slow" not in error_log.read_text()
