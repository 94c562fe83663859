import importlib
import logging
import os
import unittest
from unittest import mock

from prodplan.utilities import config


class TestConfig(unittest.TestCase):

    def tearDown(self):
        logger = logging.getLogger("prodplan")
        for handler in list(logger.handlers):
            if handler.get_name() == "prodplan":
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        importlib.reload(config)

    def test_log_level_from_environment(self):
        with mock.patch.dict(os.environ, {"PRODPLAN_LOG_LEVEL": "debug"}):
            reloaded = importlib.reload(config)
            self.assertEqual(reloaded.LOG_LEVEL, "DEBUG")

    def test_default_log_level(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            reloaded = importlib.reload(config)
            self.assertEqual(reloaded.LOG_LEVEL, "WARNING")

    def test_configure_logging_is_idempotent(self):
        logger = config.configure_logging("info")
        config.configure_logging("info")
        handlers = [h for h in logger.handlers if h.get_name() == "prodplan"]
        self.assertEqual(len(handlers), 1)
        self.assertEqual(logger.level, logging.INFO)

    def test_configure_logging_ignores_other_handlers(self):
        logger = logging.getLogger("prodplan")
        other = logging.NullHandler()
        other.set_name("audit")
        logger.addHandler(other)
        try:
            config.configure_logging()
            names = [h.get_name() for h in logger.handlers]
            self.assertEqual(names.count("prodplan"), 1)
            self.assertIn("audit", names)
        finally:
            logger.removeHandler(other)

    def test_explicit_level_overrides_setting(self):
        with mock.patch.dict(os.environ, {"PRODPLAN_LOG_LEVEL": "ERROR"}):
            reloaded = importlib.reload(config)
            self.assertEqual(reloaded.configure_logging().level, logging.ERROR)
            self.assertEqual(reloaded.configure_logging("debug").level, logging.DEBUG)

    def test_package_loggers_propagate_to_configured_logger(self):
        config.configure_logging("DEBUG")
        child = logging.getLogger("prodplan.domain.ProductionPlan")
        self.assertEqual(child.getEffectiveLevel(), logging.DEBUG)
