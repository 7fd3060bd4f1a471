import unittest
import os
import yaml
from unittest.mock import patch, mock_open
from core.config_loader import load_config, AppConfig
from core.ranking import SortBy

class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "api": {"base_url": "http://catalog:8000", "request_timeout_seconds": 10},
            "analysis": {
                "top_skills_limit": 5,
                "default_sort_by": "match_percentage_desc",
                "thresholds": {"excellent": 90}
            },
            "export": {"line_terminator": "\r\n"},
            "web": {"port": 9000}
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config_default(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertIsInstance(config, AppConfig)
                self.assertEqual(config.api.base_url, "http://catalog:8000")
                self.assertEqual(config.api.api_prefix, "/api/v1")
                self.assertEqual(config.analysis.top_skills_limit, 5)
                self.assertEqual(config.analysis.default_sort_by, SortBy.MATCH_PERCENTAGE_DESC)
                self.assertEqual(config.analysis.thresholds.excellent, 90)
                self.assertEqual(config.analysis.thresholds.good, 60)
                self.assertEqual(config.export.line_terminator, "\r\n")
                self.assertEqual(config.web.port, 9000)

    def test_env_var_override_api_url(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"SKILLSCOUT_API_URL": "http://env-catalog:8000"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.api.base_url, "http://env-catalog:8000")

    def test_env_var_override_web(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"WEB_HOST": "127.0.0.1", "WEB_PORT": "8181"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.web.host, "127.0.0.1")
                    self.assertEqual(config.web.port, 8181)

    def test_missing_file_uses_defaults(self):
        with patch("os.path.exists", return_value=False):
            with patch.dict(os.environ, {}, clear=False):
                os.environ.pop("SKILLSCOUT_API_URL", None)
                config = load_config("missing.yaml")
                self.assertEqual(config.api.base_url, "http://localhost:8000")
                self.assertEqual(config.analysis.default_sort_by, SortBy.MISSING_SKILLS_ASC)
                self.assertEqual(config.export.filename, "skill-analysis.csv")
                self.assertEqual(config.web.login_rate_limit, "5/minute")

    def test_empty_file_uses_defaults(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                config = load_config("empty.yaml")
                self.assertEqual(config.analysis.top_skills_limit, 10)

if __name__ == "__main__":
    unittest.main()
