"""Unit tests for disk usage measurement."""

from unittest.mock import patch

from tmexclude.exclusion.usage import measure_disk_usage
from tmexclude.utils.shell import CommandResult


class TestMeasureDiskUsage:
    """Tests for measure_disk_usage."""

    def test_parses_du_output(self) -> None:
        """du -sk output is converted to bytes."""
        with patch("tmexclude.exclusion.usage.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout="2048\t/Users/u/proj/node_modules\n", stderr="", returncode=0
            )
            size = measure_disk_usage("/Users/u/proj/node_modules")

        assert size == 2048 * 1024
        mock_run.assert_called_once_with(["du", "-sk", "/Users/u/proj/node_modules"])

    def test_partial_errors_still_report_total(self) -> None:
        """A non-zero exit with a total still yields the total."""
        with patch("tmexclude.exclusion.usage.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout="12\t/p\n", stderr="du: /p/x: Permission denied\n", returncode=1
            )
            assert measure_disk_usage("/p") == 12 * 1024

    def test_no_output_is_unknown(self) -> None:
        """A failure without output yields None."""
        with patch("tmexclude.exclusion.usage.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout="", stderr="du: /p: No such file or directory\n", returncode=1
            )
            assert measure_disk_usage("/p") is None

    def test_garbage_output_is_unknown(self) -> None:
        """Unparseable output yields None."""
        with patch("tmexclude.exclusion.usage.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="lots\t/p\n", stderr="", returncode=0)
            assert measure_disk_usage("/p") is None

    def test_missing_du_is_unknown(self) -> None:
        """A missing du binary yields None."""
        with patch("tmexclude.exclusion.usage.run_command", side_effect=FileNotFoundError("du")):
            assert measure_disk_usage("/p") is None

    def test_undecodable_output_is_unknown(self) -> None:
        """A decode failure yields None instead of escaping."""
        error = UnicodeDecodeError("utf-8", b"4\t/p\xff", 3, 4, "invalid start byte")
        with patch("tmexclude.exclusion.usage.run_command", side_effect=error):
            assert measure_disk_usage("/p") is None

    def test_non_utf8_path_in_output(self) -> None:
        """Output echoing a non UTF-8 path still parses."""
        path = "/p/proj" + b"\xff".decode("utf-8", "surrogateescape")
        with patch("tmexclude.exclusion.usage.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout=f"8\t{path}\n", stderr="", returncode=0)
            assert measure_disk_usage(path) == 8 * 1024
