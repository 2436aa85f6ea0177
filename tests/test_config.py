import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from pypincheck.core import config as config_module
from pypincheck.core.config import Config, ConfigError
from pypincheck.core.models import RepetitionRule


class ConfigTestCase(unittest.TestCase):
    """Runs each test in an empty directory with no user config and no PINCHECK_* variables."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)
        self._old_cwd = os.getcwd()
        os.chdir(self.tmp_path)

        self.user_config_path = self.tmp_path / "home" / "config.toml"
        path_patch = patch.object(config_module, "USER_CONFIG_PATH", self.user_config_path)
        path_patch.start()
        self.addCleanup(path_patch.stop)

        clean_env = {k: v for k, v in os.environ.items() if not k.startswith("PINCHECK_")}
        env_patch = patch.dict(os.environ, clean_env, clear=True)
        env_patch.start()
        self.addCleanup(env_patch.stop)

    def tearDown(self):
        os.chdir(self._old_cwd)
        self._tmp.cleanup()

    def write(self, name: str, content: str) -> Path:
        path = self.tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path


class TestConfigLoading(ConfigTestCase):

    def test_defaults(self):
        rules = Config().rule_configuration()
        self.assertTrue(rules.only_numbers)
        self.assertEqual((rules.min_length, rules.max_length), (6, 6))
        self.assertFalse(rules.no_cross_pattern)

    def test_project_file(self):
        self.write("pincheck.toml", "[pin_rules]\nno_cross_pattern = true\nmin_length = 4\n")
        rules = Config().rule_configuration()
        self.assertTrue(rules.no_cross_pattern)
        self.assertEqual(rules.min_length, 4)
        self.assertEqual(rules.max_length, 6)

    def test_user_file_overrides_project_file(self):
        self.write("pincheck.toml", "[pin_rules]\nmin_length = 4\n")
        self.write("home/config.toml", "[pin_rules]\nmin_length = 5\n")
        self.assertEqual(Config().get("pin_rules.min_length"), 5)

    def test_explicit_file_replaces_default_locations(self):
        self.write("pincheck.toml", "[pin_rules]\nmin_length = 4\n")
        custom = self.write("custom.toml", "[pin_rules]\nno_repeated_numbers = 3\n")
        cfg = Config(config_path=custom)
        self.assertEqual(cfg.get("pin_rules.min_length"), 6)
        self.assertEqual(cfg.rule_configuration().no_repeated_numbers, RepetitionRule.with_threshold(3))

    def test_environment_overrides_files(self):
        self.write("pincheck.toml", "[pin_rules]\nmin_length = 4\n")
        with patch.dict(os.environ, {
            "PINCHECK_MIN_LENGTH": "3",
            "PINCHECK_ONLY_NUMBERS": "false",
            "PINCHECK_NO_REPEATED_NUMBERS": "3",
            "PINCHECK_NO_REPETITION_OF_TWO_SAME_NUMBERS": "yes",
        }):
            rules = Config().rule_configuration()
        self.assertEqual(rules.min_length, 3)
        self.assertFalse(rules.only_numbers)
        self.assertEqual(rules.no_repeated_numbers, RepetitionRule.with_threshold(3))
        self.assertEqual(rules.no_repetition_of_two_same_numbers, RepetitionRule.default())

    def test_invalid_env_integer_is_ignored(self):
        with patch.dict(os.environ, {"PINCHECK_MAX_LENGTH": "six"}):
            with self.assertLogs("pypincheck.core.config", level="WARNING"):
                cfg = Config()
        self.assertEqual(cfg.get("pin_rules.max_length"), 6)

    def test_unreadable_file_is_skipped(self):
        broken = self.write("broken.toml", "[pin_rules\nmin_length = ")
        with self.assertLogs("pypincheck.core.config", level="WARNING"):
            cfg = Config(config_path=broken)
        self.assertEqual(cfg.get("pin_rules.min_length"), 6)

    def test_get_and_set(self):
        cfg = Config()
        cfg.set("output.colors", False)
        self.assertFalse(cfg.colors_enabled())
        self.assertEqual(cfg.get("does.not.exist", "fallback"), "fallback")


class TestRuleConfigurationChecks(ConfigTestCase):

    def test_min_greater_than_max(self):
        cfg = Config()
        cfg.set("pin_rules.min_length", 8)
        with self.assertRaises(ConfigError):
            cfg.rule_configuration()

    def test_negative_min_length(self):
        cfg = Config()
        cfg.set("pin_rules.min_length", -1)
        with self.assertRaises(ConfigError):
            cfg.rule_configuration()

    def test_negative_threshold(self):
        cfg = Config()
        cfg.set("pin_rules.no_repeated_numbers", -2)
        with self.assertRaises(ConfigError):
            cfg.rule_configuration()

    def test_string_flag_from_file(self):
        self.write("pincheck.toml", "[pin_rules]\nonly_numbers = \"false\"\n")
        self.assertFalse(Config().rule_configuration().only_numbers)

    def test_float_length_from_file(self):
        self.write("pincheck.toml", "[pin_rules]\nmin_length = 4.9\n")
        with self.assertRaises(ConfigError):
            Config().rule_configuration()

    def test_wrong_type(self):
        cfg = Config()
        cfg.set("pin_rules.no_repetition_of_two_same_numbers", "often")
        with self.assertRaises(ConfigError):
            cfg.rule_configuration()

    def test_config_error_is_value_error(self):
        self.assertTrue(issubclass(ConfigError, ValueError))


class TestSaveUserConfig(ConfigTestCase):

    def test_saves_only_changed_values(self):
        cfg = Config()
        cfg.set("pin_rules.min_length", 4)
        cfg.save_user_config()

        content = self.user_config_path.read_text(encoding="utf-8")
        self.assertIn("min_length = 4", content)
        self.assertNotIn("max_length", content)
        self.assertEqual(Config().get("pin_rules.min_length"), 4)

    def test_environment_values_are_not_saved(self):
        with patch.dict(os.environ, {"PINCHECK_MIN_LENGTH": "3"}):
            cfg = Config()
            cfg.set("pin_rules.no_cross_pattern", True)
            cfg.save_user_config()

        with open(self.user_config_path, "rb") as f:
            saved = config_module.tomllib.load(f)
        self.assertEqual(saved, {"pin_rules": {"no_cross_pattern": True}})

    def test_project_values_are_not_saved(self):
        self.write("pincheck.toml", "[pin_rules]\nmin_length = 4\n")
        self.write("home/config.toml", "[pin_rules]\nmax_length = 8\n")
        cfg = Config()
        cfg.set("pin_rules.no_series_of_numbers", True)
        cfg.save_user_config()

        with open(self.user_config_path, "rb") as f:
            saved = config_module.tomllib.load(f)
        self.assertEqual(saved, {"pin_rules": {"max_length": 8, "no_series_of_numbers": True}})

    def test_reset(self):
        self.assertFalse(Config.reset_user_config())
        self.write("home/config.toml", "[pin_rules]\nmin_length = 5\n")
        self.assertTrue(Config.reset_user_config())
        self.assertFalse(self.user_config_path.exists())


if __name__ == '__main__':
    unittest.main()
