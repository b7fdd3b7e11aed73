import logging
import pathlib
import sys
import tempfile
import unittest

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from deformsense.config.runtime import (  # noqa: E402
    EngineConfig,
    config_from_mapping,
    configure_logging,
    load_config,
)


class EngineConfigTest(unittest.TestCase):
    def test_defaults_when_no_path(self):
        self.assertEqual(load_config(None), EngineConfig())

    def test_missing_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg = load_config(pathlib.Path(tmpdir) / "absent.yaml")
        self.assertEqual(cfg, EngineConfig())

    def test_load_engine_block_from_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "engine.yaml"
            path.write_text(
                "engine:\n"
                "  max_poll_bytes: 256\n"
                "  default_label: rest\n"
                "  sample_on_idle: true\n"
                "log_level: debug\n"
                "unknown_key: 1\n",
                encoding="utf-8",
            )

            cfg = load_config(path)

        self.assertEqual(cfg.max_poll_bytes, 256)
        self.assertEqual(cfg.default_label, "rest")
        self.assertTrue(cfg.sample_on_idle)
        self.assertEqual(cfg.log_level, "DEBUG")

    def test_non_mapping_yaml_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "engine.yaml"
            path.write_text("- 1\n- 2\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)

    def test_sanitized_clamps_values(self):
        cfg = config_from_mapping({"max_poll_bytes": 0, "log_level": "verbose"})
        self.assertEqual(cfg.max_poll_bytes, 1)
        self.assertEqual(cfg.log_level, "WARNING")

    def test_configure_logging_sets_package_level(self):
        package_logger = configure_logging(EngineConfig(log_level="info"))
        self.assertEqual(package_logger.name, "deformsense")
        self.assertEqual(package_logger.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
