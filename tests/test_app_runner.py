import io
import signal
from unittest.mock import patch

import pytest

from peak.app_runner import AppRunner, EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK
from peak.main import PhishingAnalysisKit


@pytest.fixture
def env_file(tmp_path):
    return str(tmp_path / "none.env")


@pytest.fixture
def kit(clean_env, env_file):
    return PhishingAnalysisKit(env_file, stream=io.StringIO())


# ---------------------------------------------------------------------------
# PhishingAnalysisKit
# ---------------------------------------------------------------------------

def test_analyze_file_prints_every_pane(kit, sample_eml):
    assert kit.analyze_file(sample_eml) is True

    output = kit.stream.getvalue()
    assert str(sample_eml) in output
    assert "Click here to verify." in output
    assert "  4. Subject: Your account is suspended" in output
    assert "\"PayPal Support\" <support@paypa1.example>" in output
    assert "victim@example.com" in output
    assert "\033[" not in output


def test_analyze_file_honours_default_panes(clean_env, env_file, sample_eml):
    clean_env.setenv("PEAK_DEFAULT_PANES", "senders")
    kit = PhishingAnalysisKit(env_file, stream=io.StringIO())

    kit.analyze_file(sample_eml)

    output = kit.stream.getvalue()
    assert "Senders" in output
    assert "Headers" not in output
    assert "Click here" not in output


def test_analyze_missing_file(kit, tmp_path):
    assert kit.analyze_file(tmp_path / "missing.eml") is False
    assert kit.stream.getvalue() == ""


def test_analyze_undecodable_file_shows_placeholders(kit, tmp_path):
    path = tmp_path / "broken.eml"
    path.write_bytes(b"From: a@x.com\n\n\xff\xfe")

    assert kit.analyze_file(path) is False
    assert "Failed to parse body" in kit.stream.getvalue()


def test_oversized_file_is_refused(clean_env, env_file, sample_eml):
    clean_env.setenv("PEAK_MAX_MESSAGE_BYTES", "10")
    kit = PhishingAnalysisKit(env_file, stream=io.StringIO())
    assert kit.analyze_file(sample_eml) is False


def test_analyze_files_counts_successes(kit, sample_eml, tmp_path):
    assert kit.analyze_files([sample_eml, tmp_path / "missing.eml", sample_eml]) == 2


# ---------------------------------------------------------------------------
# AppRunner
# ---------------------------------------------------------------------------

def test_requires_at_least_one_file():
    with pytest.raises(SystemExit):
        AppRunner([])


def test_parses_arguments(env_file):
    runner = AppRunner(["--config", env_file, "a.eml", "b.eml"])
    assert runner.config_file == env_file
    assert runner.files == ["a.eml", "b.eml"]


def test_default_config_file():
    assert AppRunner(["a.eml"]).config_file == ".env"


@patch("peak.app_runner.signal.signal")
def test_setup_signal_handlers(mock_signal):
    runner = AppRunner(["a.eml"])
    runner.setup_signal_handlers()

    assert mock_signal.call_count == 2
    mock_signal.assert_any_call(signal.SIGINT, runner._signal_handler)
    mock_signal.assert_any_call(signal.SIGTERM, runner._signal_handler)


def test_signal_handler_raises_keyboard_interrupt():
    with pytest.raises(KeyboardInterrupt):
        AppRunner._signal_handler(signal.SIGINT, None)


@patch("peak.app_runner.signal.signal")
def test_run_with_missing_file(mock_signal, tmp_path, capsys):
    runner = AppRunner([str(tmp_path / "missing.eml")])
    assert runner.run() == EXIT_FAILURE
    assert "is not a file" in capsys.readouterr().out


@patch("peak.app_runner.signal.signal")
def test_run_success(mock_signal, clean_env, env_file, sample_eml, capsys):
    runner = AppRunner(["--config", env_file, str(sample_eml)])
    assert runner.run() == EXIT_OK
    assert "support@paypa1.example" in capsys.readouterr().out


@patch("peak.app_runner.signal.signal")
def test_run_fails_when_nothing_parses(mock_signal, clean_env, env_file, tmp_path):
    path = tmp_path / "broken.eml"
    path.write_bytes(b"\xff\xfe")
    assert AppRunner(["--config", env_file, str(path)]).run() == EXIT_FAILURE


@patch("peak.app_runner.signal.signal")
def test_run_reports_bad_configuration(mock_signal, clean_env, env_file, sample_eml, capsys):
    clean_env.setenv("LOG_FORMAT", "xml")
    assert AppRunner(["--config", env_file, str(sample_eml)]).run() == EXIT_FAILURE
    assert "Configuration Error" in capsys.readouterr().out


@patch("peak.app_runner.signal.signal")
def test_run_interrupted(mock_signal, sample_eml):
    runner = AppRunner([str(sample_eml)])
    with patch.object(runner, "start_analysis", side_effect=KeyboardInterrupt):
        assert runner.run() == EXIT_INTERRUPTED
