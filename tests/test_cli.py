"""Tests for the command-line interface."""

import json

import pytest

from yt_extractor import cli
from yt_extractor.errors import InvalidVideoURL, MissingCredentialError
from yt_extractor.models.video import Comment, VideoResult

URL = "https://youtu.be/dQw4w9WgXcQ"


class RecordingCollector:
    """Stands in for YouTubeCollector and remembers how it was used."""

    instances = []
    error = None

    def __init__(self, settings=None, credentials=None, **kwargs):
        self.settings = settings
        self.credentials = credentials
        self.calls = []
        RecordingCollector.instances.append(self)
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True

    def collect(self, url, include_comments=False, **kwargs):
        self.calls.append((url, include_comments))
        if RecordingCollector.error:
            raise RecordingCollector.error
        return VideoResult(
            video_id="dQw4w9WgXcQ",
            transcript="hello world",
            duration=4,
            comments=[Comment("nice", ["thanks"])] if include_comments else [],
        )


@pytest.fixture(autouse=True)
def collector(monkeypatch):
    RecordingCollector.instances = []
    RecordingCollector.error = None
    monkeypatch.setattr(cli, "YouTubeCollector", RecordingCollector)
    return RecordingCollector


class TestMain:
    def test_full_record(self, capsys, collector):
        assert cli.main([URL]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data == {
            "transcript": "hello world",
            "duration": 4,
            "comments": [{"TopLevel": "nice", "Replies": ["thanks"]}],
        }
        assert collector.instances[0].calls == [(URL, True)]
        assert collector.instances[0].closed is True

    def test_duration_only(self, capsys, collector):
        assert cli.main(["--duration", URL]) == 0

        assert capsys.readouterr().out == "4\n"
        assert collector.instances[0].calls == [(URL, False)]

    def test_transcript_only(self, capsys):
        assert cli.main(["--transcript", URL]) == 0
        assert capsys.readouterr().out == "hello world\n"

    def test_comments_only(self, capsys):
        assert cli.main(["--comments", URL]) == 0
        assert json.loads(capsys.readouterr().out) == [{"TopLevel": "nice", "Replies": ["thanks"]}]

    def test_duration_wins_over_other_flags(self, capsys):
        assert cli.main(["--comments", "--transcript", "--duration", URL]) == 0
        assert capsys.readouterr().out == "4\n"

    def test_options_reach_settings(self, collector, tmp_path):
        env_file = tmp_path / ".env"
        cli.main(["--length", "250", "--all", "--lang", "de", "--env-file", str(env_file), URL])

        settings = collector.instances[0].settings
        assert settings.comment_limit == 250
        assert settings.expand_replies is True
        assert settings.lang == "de"
        assert settings.env_file == str(env_file)

    def test_config_file(self, collector, tmp_path):
        config = tmp_path / "yt.yaml"
        config.write_text("comment_limit: 30\nlang: fr\n", encoding="utf-8")

        cli.main(["--config", str(config), "--length", "40", URL])

        settings = collector.instances[0].settings
        assert settings.comment_limit == 40
        assert settings.lang == "fr"

    def test_short_config_flag_and_compact(self, capsys, collector, tmp_path):
        config = tmp_path / "yt.yaml"
        config.write_text("lang: fr\n", encoding="utf-8")

        assert cli.main(["-c", str(config), "--compact", "--duration", URL]) == 0

        settings = collector.instances[0].settings
        assert settings.lang == "fr"
        assert settings.pretty_json is False
        assert capsys.readouterr().out.strip() == "4"

    def test_config_file_coerces_quoted_numbers(self, collector, tmp_path):
        config = tmp_path / "yt.yaml"
        config.write_text('comment_limit: "50"\nexpand_replies: "yes"\n', encoding="utf-8")

        assert cli.main(["--config", str(config), URL]) == 0

        settings = collector.instances[0].settings
        assert settings.comment_limit == 50
        assert settings.expand_replies is True

    def test_config_file_not_a_mapping(self, capsys, collector, tmp_path):
        config = tmp_path / "yt.yaml"
        config.write_text("- a\n- b\n", encoding="utf-8")

        assert cli.main(["--config", str(config), URL]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Invalid settings file" in captured.err
        assert collector.instances == []

    def test_config_file_bad_value(self, capsys, tmp_path):
        config = tmp_path / "yt.json"
        config.write_text('{"comment_limit": "lots"}', encoding="utf-8")

        assert cli.main(["--config", str(config), URL]) == 1
        assert "comment_limit" in capsys.readouterr().err

    def test_output_file(self, capsys, tmp_path):
        out = tmp_path / "result.json"
        assert cli.main(["-o", str(out), URL]) == 0

        assert json.loads(out.read_text(encoding="utf-8"))["duration"] == 4
        assert json.loads(capsys.readouterr().out)["duration"] == 4

    def test_fatal_error(self, capsys, collector):
        collector.error = InvalidVideoURL("not a url")

        assert cli.main(["not a url"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Invalid YouTube URL: not a url" in captured.err

    def test_missing_key(self, capsys, collector):
        collector.error = MissingCredentialError("YOUTUBE_API_KEY not found")
        assert cli.main([URL]) == 1
        assert "YOUTUBE_API_KEY" in capsys.readouterr().err

    def test_no_url(self):
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == 2


class TestSelectMode:
    def test_default_is_full(self):
        args = cli.build_parser().parse_args([URL])
        assert cli.select_mode(args) is cli.OutputMode.FULL
