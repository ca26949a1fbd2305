import tempfile
import unittest
from pathlib import Path

from jarlauncher.config import LaunchConfig, load_launch_config
from jarlauncher.core.errors import ConfigError
from jarlauncher.core.variant import Variant


class TestLoadLaunchConfig(unittest.TestCase):
    def _write(self, td: str, text: str) -> Path:
        p = Path(td) / "launch.yaml"
        p.write_text(text, encoding="utf-8")
        return p

    def test_loads_all_fields(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = self._write(
                td,
                "\n".join(
                    [
                        "variant: plain-uber",
                        "java_home: /opt/jdk",
                        "log_level: info",
                        "jvm_args: ['-Xmx512m']",
                        "app_args: ['--spring.profiles.active=prod']",
                        "operation_args:",
                        "  flamingock.change-id: c1",
                    ]
                ),
            )
            cfg = load_launch_config(p)
        self.assertIs(cfg.variant, Variant.FLAT_EXECUTABLE_BUNDLE)
        self.assertEqual(cfg.java_home, "/opt/jdk")
        self.assertEqual(cfg.log_level, "info")
        self.assertEqual(cfg.jvm_args, ("-Xmx512m",))
        self.assertEqual(cfg.app_args, ("--spring.profiles.active=prod",))
        self.assertEqual(cfg.operation_args, {"flamingock.change-id": "c1"})

    def test_empty_file_is_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self.assertEqual(load_launch_config(self._write(td, "")), LaunchConfig())

    def test_unknown_key_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ConfigError) as cm:
                load_launch_config(self._write(td, "jar_path: /x.jar\n"))
        self.assertEqual(cm.exception.code, "config.invalid")
        self.assertTrue(cm.exception.data["errors"])

    def test_wrong_types_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ConfigError):
                load_launch_config(self._write(td, "jvm_args: -Xmx1g\n"))
            with self.assertRaises(ConfigError):
                load_launch_config(self._write(td, "variant: war\n"))

    def test_non_mapping_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ConfigError):
                load_launch_config(self._write(td, "- a\n- b\n"))

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ConfigError) as cm:
                load_launch_config(Path(td) / "nope.yaml")
        self.assertEqual(cm.exception.code, "config.unreadable")


class TestLaunchConfigMerge(unittest.TestCase):
    def test_cli_scalars_win_and_lists_append(self) -> None:
        cfg = LaunchConfig(
            variant=Variant.FLAT_EXECUTABLE_BUNDLE,
            log_level="info",
            jvm_args=("-Xmx512m",),
            app_args=("--a=1",),
            operation_args={"k": "config", "only": "config"},
        )
        merged = cfg.merge(
            log_level="debug",
            jvm_args=["-Xss1m"],
            app_args=["--b=2"],
            operation_args={"k": "cli"},
        )
        self.assertIs(merged.variant, Variant.FLAT_EXECUTABLE_BUNDLE)
        self.assertEqual(merged.log_level, "debug")
        self.assertEqual(merged.jvm_args, ("-Xmx512m", "-Xss1m"))
        self.assertEqual(merged.app_args, ("--a=1", "--b=2"))
        self.assertEqual(merged.operation_args, {"k": "cli", "only": "config"})
        self.assertEqual(cfg.operation_args, {"k": "config", "only": "config"})


if __name__ == "__main__":
    unittest.main()
