import importlib
import os
import unittest
from unittest import mock

from ludo_engine.config import Config

config_module = importlib.import_module("ludo_engine.config")


class TestConfig(unittest.TestCase):
    def test_board_constants(self):
        cfg = Config()
        self.assertEqual(cfg.BOARD_SIZE, 15)
        self.assertEqual(cfg.PATH_LENGTH, 56)
        self.assertEqual(cfg.FINISH_INDEX, 56)
        self.assertEqual(cfg.LAST_PATH_INDEX, 55)
        self.assertEqual(cfg.HOME_STRETCH_START, 51)
        self.assertEqual(cfg.CENTER, 7)

    def test_custom_values(self):
        cfg = Config(ROLL_TICKS=3, MOVE_DELAY_MS=0)
        self.assertEqual(cfg.ROLL_TICKS, 3)
        self.assertEqual(cfg.MOVE_DELAY_MS, 0)

    def test_negative_delays_rejected(self):
        with self.assertRaises(ValueError):
            Config(ROLL_TICKS=-1)
        with self.assertRaises(ValueError):
            Config(NO_MOVE_DELAY_MS=-5)

    def test_env_overrides(self):
        env = {"LUDO_SEED": "42", "ROLL_TICK_MS": "5", "LUDO_LOG_LEVEL": "DEBUG"}
        try:
            with mock.patch.dict(os.environ, env):
                module = importlib.reload(config_module)
                self.assertEqual(module.config.SEED, 42)
                self.assertEqual(module.config.ROLL_TICK_MS, 5)
                self.assertEqual(module.config.LOG_LEVEL, "DEBUG")
        finally:
            importlib.reload(config_module)

    def test_blank_seed_is_none(self):
        try:
            with mock.patch.dict(os.environ, {"LUDO_SEED": " "}):
                module = importlib.reload(config_module)
                self.assertIsNone(module.config.SEED)
        finally:
            importlib.reload(config_module)


if __name__ == "__main__":
    unittest.main()
