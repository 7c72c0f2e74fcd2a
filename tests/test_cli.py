"""Tests for the command-line interface."""

import json

import numpy as np

from sound_profile.cli import main


def test_prints_five_bars(write_wav, make_sine, capsys):
    path = write_wav(make_sine(440.0, 1.0))

    assert main([str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert [line[:15].rstrip() for line in lines] == [
        "Aggressiveness:",
        "Tonality:",
        "Softness:",
        "High-Low Bal:",
        "Density:",
    ]
    for line in lines:
        bar = line[16:36]
        assert len(bar) == 20
        assert set(bar) <= {"#", "-"}
        assert line.endswith("%")


def test_json_output(write_wav, capsys):
    path = write_wav(np.zeros(44100))

    assert main([str(path), "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["scores"]["high_low_balance"] == 50.0
    assert payload["silence_ratio"] == 1.0


def test_output_file(write_wav, make_sine, tmp_path):
    path = write_wav(make_sine(440.0, 0.5))
    output = tmp_path / "profile.json"

    assert main([str(path), "-o", str(output)]) == 0
    assert set(json.loads(output.read_text())["scores"]) == {
        "aggressiveness",
        "tonality",
        "softness",
        "high_low_balance",
        "density",
    }


def test_missing_file_exits_nonzero(tmp_path, capsys):
    assert main([str(tmp_path / "missing.wav")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_default_input_is_song_wav(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "song.wav" in capsys.readouterr().err


def _fail_analysis(self, file_path):
    raise RuntimeError("decoder exploded")


def test_unexpected_failure_exits_nonzero(write_wav, monkeypatch, capsys):
    monkeypatch.setattr("sound_profile.cli.ProfilePipeline.analyze_file", _fail_analysis)
    path = write_wav(np.zeros(44100))

    assert main([str(path)]) == 1

    captured = capsys.readouterr()
    assert "Error: decoder exploded" in captured.err
    assert "Traceback" not in captured.err


def test_unexpected_failure_logs_traceback_when_verbose(write_wav, monkeypatch, capsys, caplog):
    monkeypatch.setattr("sound_profile.cli.ProfilePipeline.analyze_file", _fail_analysis)
    path = write_wav(np.zeros(44100))

    assert main([str(path), "-v"]) == 1

    assert "Error: decoder exploded" in capsys.readouterr().err
    failures = [record for record in caplog.records if record.exc_info]
    assert failures
    assert failures[0].exc_info[0] is RuntimeError
