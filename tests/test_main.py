import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from click.testing import CliRunner
from pkgprobe import config
from pkgprobe.main import cli

SAME_HOST = {"HOST": "x86_64-linux", "TARGET": "x86_64-linux"}


@patch('pkgprobe.resolver.logger')
@patch('pkgprobe.resolver.run_shell_command')
class TestProbeCommand(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()

    @patch('pkgprobe.commands.probe.logger')
    def test_probe_prints_directives(self, mock_cmd_logger, mock_run, mock_logger):
        mock_run.return_value = ("-L/opt/lib -lfoo", "", 0)
        with patch.dict(os.environ, SAME_HOST, clear=True):
            result = self.runner.invoke(cli, ["probe", "foo"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("cargo:rustc-link-search=native=/opt/lib", result.output)
        self.assertIn("cargo:rustc-link-lib=foo", result.output)
        mock_cmd_logger.success.assert_called_once_with("Found foo")

    @patch('pkgprobe.commands.probe.logger')
    def test_probe_options(self, mock_cmd_logger, mock_run, mock_logger):
        mock_run.return_value = ("-lfoo", "", 0)
        with patch.dict(os.environ, SAME_HOST, clear=True):
            result = self.runner.invoke(cli, ["probe", "foo", "--static", "--atleast-version", "3.1"])

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(mock_run.call_args[0][0],
                         ["pkg-config", "--static", "--libs", "--cflags", "foo >= 3.1"])

    @patch('pkgprobe.decorators.logger')
    def test_probe_failure_exits_non_zero(self, mock_dec_logger, mock_run, mock_logger):
        mock_run.return_value = ("", "Package foo was not found", 1)
        with patch.dict(os.environ, SAME_HOST, clear=True):
            result = self.runner.invoke(cli, ["probe", "foo"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Package foo was not found", mock_dec_logger.error.call_args[0][0])

    @patch('pkgprobe.decorators.logger')
    def test_probe_disabled_library_is_not_an_error(self, mock_dec_logger, mock_run, mock_logger):
        env = dict(SAME_HOST, FOO_NO_PKG_CONFIG="1")
        with patch.dict(os.environ, env, clear=True):
            result = self.runner.invoke(cli, ["probe", "foo"])

        self.assertEqual(result.exit_code, 0)
        mock_dec_logger.error.assert_not_called()
        mock_run.assert_not_called()
        mock_logger.info.assert_called_once_with("Skipping pkg-config for foo: FOO_NO_PKG_CONFIG is set")

    @patch('pkgprobe.decorators.logger')
    def test_probe_cross_compile(self, mock_dec_logger, mock_run, mock_logger):
        env = {"HOST": "x86_64-linux", "TARGET": "aarch64-linux"}
        with patch.dict(os.environ, env, clear=True):
            result = self.runner.invoke(cli, ["probe", "foo"])

        self.assertEqual(result.exit_code, 1)
        mock_run.assert_not_called()


@patch('pkgprobe.resolver.logger')
@patch('pkgprobe.resolver.run_shell_command')
@patch('pkgprobe.commands.check.logger')
class TestCheckCommand(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.test_dir = tempfile.mkdtemp()
        config.save_config({
            "libraries": {
                "zlib": {"atleast_version": "1.2"},
                "ssl": {"static": True},
            }
        }, path=self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_check_all_found(self, mock_logger, mock_run, mock_resolver_logger):
        mock_run.return_value = ("-lz", "", 0)
        with patch.dict(os.environ, SAME_HOST, clear=True):
            result = self.runner.invoke(cli, ["--path", self.test_dir, "check"])

        self.assertEqual(result.exit_code, 0)
        commands = [c[0][0] for c in mock_run.call_args_list]
        self.assertEqual(commands, [
            ["pkg-config", "--libs", "--cflags", "zlib >= 1.2"],
            ["pkg-config", "--static", "--libs", "--cflags", "ssl"],
        ])
        mock_logger.success.assert_any_call("All libraries resolved.")

    def test_check_reports_failures(self, mock_logger, mock_run, mock_resolver_logger):
        mock_run.side_effect = [("-lz", "", 0), ("", "no ssl", 1)]
        with patch.dict(os.environ, SAME_HOST, clear=True):
            result = self.runner.invoke(cli, ["--path", self.test_dir, "check"])

        self.assertEqual(result.exit_code, 1)
        mock_logger.error.assert_any_call("Could not resolve: ssl")

    def test_check_disabled_library_is_not_a_failure(self, mock_logger, mock_run, mock_resolver_logger):
        mock_run.return_value = ("-lz", "", 0)
        env = dict(SAME_HOST, SSL_NO_PKG_CONFIG="1")
        with patch.dict(os.environ, env, clear=True):
            result = self.runner.invoke(cli, ["--path", self.test_dir, "check"])

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(mock_run.call_count, 1)
        mock_logger.info.assert_not_called()
        mock_resolver_logger.info.assert_called_once_with("Skipping pkg-config for ssl: SSL_NO_PKG_CONFIG is set")

    def test_check_without_config(self, mock_logger, mock_run, mock_resolver_logger):
        empty_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, empty_dir)
        result = self.runner.invoke(cli, ["--path", empty_dir, "check"])

        self.assertEqual(result.exit_code, 1)
        mock_run.assert_not_called()
        mock_logger.error.assert_called_once_with(f"Error: No pkgprobe.toml found in {empty_dir}.")

    def test_check_empty_config_is_not_reported_missing(self, mock_logger, mock_run, mock_resolver_logger):
        empty_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, empty_dir)
        with open(os.path.join(empty_dir, config.CONFIG_FILE), "w") as f:
            f.write("")
        result = self.runner.invoke(cli, ["--path", empty_dir, "check"])

        self.assertEqual(result.exit_code, 0)
        mock_logger.error.assert_not_called()
        mock_logger.warning.assert_called_once_with("No libraries listed in pkgprobe.toml.")

    @patch('pkgprobe.config.logger')
    def test_check_invalid_config_is_not_reported_missing(self, mock_config_logger, mock_logger, mock_run, mock_resolver_logger):
        bad_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, bad_dir)
        with open(os.path.join(bad_dir, config.CONFIG_FILE), "w") as f:
            f.write("[libraries\nzlib = ")
        result = self.runner.invoke(cli, ["--path", bad_dir, "check"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error decoding TOML file", mock_config_logger.error.call_args[0][0])
        mock_logger.error.assert_not_called()
        mock_run.assert_not_called()


class TestEnvCommand(unittest.TestCase):

    def test_env_shows_matching_rule(self):
        runner = CliRunner()
        with patch.dict(os.environ, {"GTK_3_DYNAMIC": "1", "PKG_CONFIG_ALL_STATIC": "1"}, clear=True):
            result = runner.invoke(cli, ["env", "gtk-3"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("GTK_3_NO_PKG_CONFIG: unset", result.output)
        self.assertIn("GTK_3_DYNAMIC (dynamic): set", result.output)
        self.assertIn("link mode: dynamic (from GTK_3_DYNAMIC)", result.output)

    def test_env_default(self):
        runner = CliRunner()
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(cli, ["env", "foo"])

        self.assertIn("link mode: dynamic (default)", result.output)
        self.assertIn("cross compilation allowed: yes", result.output)


class TestVersionCommand(unittest.TestCase):

    @patch('pkgprobe.commands.version.logger')
    @patch('importlib.metadata.version', return_value="0.1.0")
    def test_version(self, mock_version, mock_logger):
        result = CliRunner().invoke(cli, ["version"])
        self.assertEqual(result.exit_code, 0)
        mock_logger.info.assert_called_once_with("pkgprobe version 0.1.0")


class TestLogCommand(unittest.TestCase):

    def setUp(self):
        self.log_dir = tempfile.mkdtemp()
        with open(os.path.join(self.log_dir, "pkgprobe_20260101_000000.log"), "w") as f:
            f.write("[00:00:00] [INFO] probing foo\n[00:00:01] [ERROR] failed\n")

    def tearDown(self):
        shutil.rmtree(self.log_dir)

    def test_list(self):
        with patch('pkgprobe.commands.log.LOG_DIR', self.log_dir):
            result = CliRunner().invoke(cli, ["log", "--list"])
        self.assertIn("pkgprobe_20260101_000000.log", result.output)

    def test_show_named_file(self):
        with patch('pkgprobe.commands.log.LOG_DIR', self.log_dir):
            result = CliRunner().invoke(cli, ["log", "--filename", "pkgprobe_20260101_000000.log"])
        self.assertIn("probing foo", result.output)
        self.assertIn("[ERROR] failed", result.output)

    def test_missing_file(self):
        with patch('pkgprobe.commands.log.LOG_DIR', self.log_dir):
            result = CliRunner().invoke(cli, ["log", "--filename", "nope.log"])
        self.assertIn("No log files found.", result.output)

if __name__ == '__main__':
    unittest.main()
