"""Smoke tests for the CLI.

Uses Click's CliRunner with the hidapi transport replaced by an
in-memory one, so no hardware is needed.
"""

from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from dcnotifier.cli.main import cli

NOTIFIER = (0x1D34, 0x0004)
MOUSE = (0x046D, 0xC077)
ACTIVATION = bytes([0x1F, 0x02, 0x00, 0x5F, 0x00, 0x00, 0x1A, 0x03])


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def bus(transport_factory, device_factory):
    """Patch the default transport with a fake bus of two notifiers and a mouse."""
    transport = transport_factory([
        device_factory("notifier-1", NOTIFIER),
        device_factory("mouse", MOUSE),
        device_factory("notifier-2", NOTIFIER),
    ])

    def factory():
        transport.open()
        return transport

    with patch("dcnotifier.devices.notifier.open_transport", side_effect=factory):
        yield transport


class TestCLIHelp:
    """Test help and version output."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Dream Cheeky Notifier' in result.output
        assert '--vendor-id' in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output


class TestArguments:
    """Test argument validation happens before any device I/O."""

    def test_missing_arguments(self, runner):
        with patch("dcnotifier.devices.notifier.open_transport") as factory:
            result = runner.invoke(cli, ['1', '2'])
        assert result.exit_code == 2
        factory.assert_not_called()

    def test_too_many_arguments(self, runner):
        result = runner.invoke(cli, ['1', '2', '3', '0', '9'])
        assert result.exit_code == 2

    @pytest.mark.parametrize("args", [['32', '0', '0'], ['0', '0', '99'], ['x', '0', '0']])
    def test_invalid_color_exits_before_io(self, runner, args):
        with patch("dcnotifier.devices.notifier.open_transport") as factory:
            result = runner.invoke(cli, args)

        assert result.exit_code == 2
        assert 'ERROR: Invalid value' in result.output
        factory.assert_not_called()

    def test_invalid_input_shows_usage(self, runner):
        """Test that input errors print the usage line as a suggestion."""
        result = runner.invoke(cli, ['32', '0', '0'])

        assert result.exit_code == 2
        assert 'Suggestion: usage: dcnotifier R G B [A]' in result.output
        assert '0-31' in result.output

    @pytest.mark.parametrize("args", [['+5', '0', '0'], ['0', '1_0', '0'], ['0', '0', ' 5']])
    def test_loose_integers_rejected(self, runner, args):
        with patch("dcnotifier.devices.notifier.open_transport") as factory:
            result = runner.invoke(cli, args)

        assert result.exit_code == 2
        assert 'must be a base-10 integer' in result.output
        factory.assert_not_called()

    def test_negative_value_reaches_validation(self, runner):
        """Test that -1 is treated as a value, not an option."""
        with patch("dcnotifier.devices.notifier.open_transport") as factory:
            result = runner.invoke(cli, ['-1', '0', '0'])

        assert result.exit_code == 2
        assert "Invalid value for 'red'" in result.output
        factory.assert_not_called()

    def test_bad_vendor_id(self, runner):
        result = runner.invoke(cli, ['1', '2', '3', '--vendor-id', 'zz'])
        assert result.exit_code == 2


@pytest.mark.integration
class TestRun:
    """Test full runs against the fake bus."""

    def test_sets_color_on_all_notifiers(self, runner, bus):
        result = runner.invoke(cli, ['31', '0', '0'])

        assert result.exit_code == 0
        assert 'device = notifier-1' in result.output
        assert 'device = notifier-2' in result.output
        assert 'Set color (31, 0, 0) on 2 device(s)' in result.output
        assert [path for path, _ in bus.writes] == [b"notifier-1", b"notifier-1", b"notifier-2"]
        assert bus.writes[0][1] == ACTIVATION

    def test_skip_activation(self, runner, bus):
        result = runner.invoke(cli, ['0', '31', '0', '1'])

        assert result.exit_code == 0
        assert ACTIVATION not in [payload for _, payload in bus.writes]
        assert len(bus.writes) == 2

    def test_negative_skip_flag(self, runner, bus):
        result = runner.invoke(cli, ['0', '0', '31', '-5'])

        assert result.exit_code == 0
        assert ACTIVATION not in [payload for _, payload in bus.writes]

    def test_write_failure_is_warning(self, runner, bus):
        bus.fail_write = lambda device, payload: device.path == b"notifier-2"

        result = runner.invoke(cli, ['5', '5', '5'])

        assert result.exit_code == 0
        assert 'WARNING: color report to notifier-2 failed' in result.output
        assert 'Set color (5, 5, 5) on 2 device(s)' in result.output
        assert result.output.lower().count("notifier-2 failed") == 1

    def test_write_failure_detail_with_verbose(self, runner, bus):
        bus.fail_write = lambda device, payload: device.path == b"notifier-2"

        result = runner.invoke(cli, ['5', '5', '5', '-v'])

        assert result.exit_code == 0
        assert 'INFO: Color report to notifier-2 failed' in result.output

    def test_skipped_devices_reported(self, runner, bus):
        result = runner.invoke(cli, ['1', '1', '1'])

        assert result.exit_code == 0
        assert 'skipping device mouse' in result.output
        assert 'skipping device notifier' not in result.output

    def test_no_notifier_found(self, runner, bus):
        bus.devices = []

        result = runner.invoke(cli, ['1', '1', '1'])

        assert result.exit_code == 0
        assert 'No Dream Cheeky notifier found' in result.output

    def test_vendor_override(self, runner, bus):
        result = runner.invoke(cli, ['1', '1', '1', '--vendor-id', '0x046d', '--product-id', '0xC077'])

        assert result.exit_code == 0
        assert 'device = mouse' in result.output

    def test_enumeration_failure_exits_1(self, runner, bus):
        bus.fail_enumerate = True

        result = runner.invoke(cli, ['1', '1', '1'])

        assert result.exit_code == 1
        assert 'ERROR: Could not enumerate HID devices.' in result.output
        assert bus.writes == []

    def test_unexpected_error_exits_1(self, runner):
        with patch("dcnotifier.devices.notifier.open_transport", Mock(side_effect=RuntimeError("boom"))):
            result = runner.invoke(cli, ['1', '1', '1'])

        assert result.exit_code == 1
        assert 'RuntimeError: boom' in result.output

    def test_debug_log_file(self, runner, bus, tmp_path):
        log_file = tmp_path / "run.log"

        result = runner.invoke(cli, ['1', '1', '1', '--log-file', str(log_file), '--log-level', 'DEBUG'])

        assert result.exit_code == 0
        assert "Sending color report to notifier-1" in log_file.read_text()
