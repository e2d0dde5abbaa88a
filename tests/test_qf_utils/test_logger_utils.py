import json
import logging

from qf_utils.logger_utils import LOGGER_NAME, get_logger, set_log_level


def test_get_logger_attaches_single_json_handler():
    logger = get_logger("questify.test_handlers")
    get_logger("questify.test_handlers")

    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_log_lines_are_json(capsys):
    logger = get_logger("questify.test_json")
    logger.info("Material ready: Fotosíntesis")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "Material ready: Fotosíntesis"
    assert record["levelname"] == "INFO"


def test_set_log_level():
    set_log_level("debug")
    assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
    set_log_level("INFO")
