# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
import os

import pytest

from mdtranslate import __version__, cli
from mdtranslate.errors import TranslationTransportError
from mdtranslate.translator.md_translator import MDTranslatorConfig
from mdtranslate.workflow.md_workflow import MarkdownWorkflow, MarkdownWorkflowConfig
from tests.conftest import StubTranslationClient


@pytest.fixture(autouse=True)
def no_translator_env(monkeypatch):
    # set-then-delete so values loaded from .env files are removed afterwards too
    for name in ("TRANSLATOR_KEY", "AZURE_TRANSLATOR_KEY", "TRANSLATOR_REGION", "TRANSLATOR_ENDPOINT"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "in.md"
    path.write_text("# Title\n\n- a\n- b\n", encoding="utf-8")
    return path


class TestUsage:
    @pytest.mark.parametrize("argv", [[], ["only-one.md"]])
    def test_missing_paths_print_usage(self, argv, capsys):
        cli.main(argv)
        out = capsys.readouterr().out
        assert "Usage: mdtranslate" in out
        assert "--to-lang" in out

    def test_usage_in_japanese(self, capsys):
        cli.main(["--lang", "ja"])
        assert "使い方" in capsys.readouterr().out

    def test_version(self, capsys):
        cli.main(["--version"])
        assert capsys.readouterr().out.strip() == __version__


class TestRun:
    def test_skip_translate_writes_destination(self, source, tmp_path, capsys):
        destination = tmp_path / "out.md"
        cli.main([str(source), str(destination), "--skip-translate", "--no-env"])
        assert destination.read_text(encoding="utf-8") == "# Title\n\n- a\n\n- b\n\n"
        assert "Generated" in capsys.readouterr().out

    def test_existing_destination_is_overwritten(self, source, tmp_path):
        destination = tmp_path / "out.md"
        destination.write_text("x" * 200, encoding="utf-8")
        cli.main([str(source), str(destination), "--skip-translate", "--no-env"])
        assert destination.read_text(encoding="utf-8") == "# Title\n\n- a\n\n- b\n\n"

    def test_key_from_env_file(self, source, tmp_path, monkeypatch):
        env_file = tmp_path / "custom.env"
        env_file.write_text("TRANSLATOR_KEY=from-file\n", encoding="utf-8")
        seen = {}

        def fake_build_workflow(ns):
            seen["key"] = os.environ.get("TRANSLATOR_KEY")
            config = MDTranslatorConfig(to_lang=ns.to_lang)
            return MarkdownWorkflow(MarkdownWorkflowConfig(translator_config=config), client=StubTranslationClient())

        monkeypatch.setattr(cli, "_build_workflow", fake_build_workflow)
        cli.main([str(source), str(tmp_path / "out.md"), "--env-file", str(env_file)])
        assert seen["key"] == "from-file"


class TestExitCodes:
    def test_missing_source(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([str(tmp_path / "missing.md"), str(tmp_path / "out.md"), "--no-env"])
        assert exc_info.value.code == cli.EC_INVALID_INPUT

    def test_missing_key(self, source, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([str(source), str(tmp_path / "out.md"), "--no-env"])
        assert exc_info.value.code == cli.EC_CONFIG_ERROR
        assert "TRANSLATOR_KEY" in capsys.readouterr().err

    def test_blank_target_language(self, source, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([str(source), str(tmp_path / "out.md"), "--skip-translate", "--no-env", "--to-lang", " "])
        assert exc_info.value.code == cli.EC_CONFIG_ERROR

    def test_unsupported_construct_writes_nothing(self, tmp_path):
        source = tmp_path / "quote.md"
        source.write_text("# Title\n\n> quoted\n", encoding="utf-8")
        destination = tmp_path / "out.md"
        with pytest.raises(SystemExit) as exc_info:
            cli.main([str(source), str(destination), "--skip-translate", "--no-env"])
        assert exc_info.value.code == cli.EC_UNSUPPORTED
        assert not destination.exists()

    def test_transport_error(self, source, tmp_path, monkeypatch):
        class FailingClient(StubTranslationClient):
            def translate(self, text, from_lang, to_lang):
                raise TranslationTransportError("Translator returned HTTP 503", status_code=503)

        client = FailingClient()

        def fake_build_workflow(ns):
            config = MDTranslatorConfig(to_lang=ns.to_lang)
            return MarkdownWorkflow(MarkdownWorkflowConfig(translator_config=config), client=client)

        monkeypatch.setattr(cli, "_build_workflow", fake_build_workflow)
        destination = tmp_path / "out.md"
        with pytest.raises(SystemExit) as exc_info:
            cli.main([str(source), str(destination), "--no-env"])
        assert exc_info.value.code == cli.EC_TRANSLATE_ERROR
        assert client.closed is True
        assert not destination.exists()

    def test_unwritable_destination(self, source, tmp_path):
        destination = tmp_path / "no-such-dir" / "out.md"
        with pytest.raises(SystemExit) as exc_info:
            cli.main([str(source), str(destination), "--skip-translate", "--no-env"])
        assert exc_info.value.code == cli.EC_OUTPUT_ERROR
