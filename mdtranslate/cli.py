# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
import argparse
import logging
import os
import sys
from pathlib import Path

from mdtranslate.errors import ConfigurationError, TranslationTransportError, UnsupportedConstructError
from mdtranslate.logger import global_logger
from mdtranslate.translator import default_params
from mdtranslate.utils.dotenv import load_env_file
from mdtranslate.utils.i18n import t

# Exit codes
EC_OK = 0
EC_INVALID_INPUT = 10
EC_CONFIG_ERROR = 20
EC_TRANSLATE_ERROR = 30
EC_UNSUPPORTED = 40
EC_OUTPUT_ERROR = 50


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtranslate",
        description="mdtranslate: translate the prose of a Markdown file, keeping its structure",
        epilog=(
            "Examples:\n"
            "  mdtranslate README.ja.md README.md --from-lang ja --to-lang en\n"
            "  mdtranslate doc.md doc.out.md --skip-translate\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source", nargs="?", help="Markdown file to translate")
    parser.add_argument("destination", nargs="?", help="Output path; overwritten if it exists")
    parser.add_argument("--from-lang", dest="from_lang", default=default_params["from_lang"],
                        help="Source language code; detected by the service when omitted")
    parser.add_argument("--to-lang", dest="to_lang", default=default_params["to_lang"],
                        help="Target language code (default: en)")
    parser.add_argument("--api-key", help="Translator key; defaults to TRANSLATOR_KEY")
    parser.add_argument("--region", help="Translator resource region; defaults to TRANSLATOR_REGION")
    parser.add_argument("--endpoint", help="Translator endpoint; defaults to TRANSLATOR_ENDPOINT")
    parser.add_argument("--timeout", type=int, default=default_params["timeout"], help="Timeout (seconds)")
    parser.add_argument("--system-proxy", action="store_true", help="Honour HTTP(S)_PROXY from the environment")
    parser.add_argument("--skip-translate", action="store_true", help="Re-emit the Markdown without calling the translator")
    parser.add_argument("--env-file", default=None, help="Load environment variables from file (default: ./.env)")
    parser.add_argument("--no-env", action="store_true", help="Do not auto-load .env from current directory")
    parser.add_argument("--lang", choices=["en", "ja"], default=os.getenv("mdtranslate_LANG", "en"),
                        help="Language for CLI messages (default: en)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def _build_workflow(ns: argparse.Namespace):
    from mdtranslate.translator.md_translator import MDTranslatorConfig
    from mdtranslate.workflow.md_workflow import MarkdownWorkflow, MarkdownWorkflowConfig

    translator_config = MDTranslatorConfig(
        from_lang=ns.from_lang,
        to_lang=ns.to_lang,
        api_key=ns.api_key or os.getenv("TRANSLATOR_KEY") or os.getenv("AZURE_TRANSLATOR_KEY"),
        region=ns.region or os.getenv("TRANSLATOR_REGION"),
        endpoint=ns.endpoint or os.getenv("TRANSLATOR_ENDPOINT"),
        timeout=ns.timeout,
        system_proxy_enable=ns.system_proxy,
        skip_translate=ns.skip_translate,
    )
    return MarkdownWorkflow(MarkdownWorkflowConfig(translator_config=translator_config))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from mdtranslate import __version__
        print(__version__)
        return

    # Both paths are needed; anything less is a request for help, not an error
    if args.source is None or args.destination is None:
        print(t("usage", lang=args.lang))
        parser.print_help()
        return

    if args.quiet:
        global_logger.setLevel(logging.WARNING)

    if not args.no_env:
        env_path_used, loaded_keys = load_env_file(args.env_file)
        if env_path_used:
            global_logger.debug(t("env_loaded", lang=args.lang, path=env_path_used, count=len(loaded_keys)))

    source = Path(args.source)
    destination = Path(args.destination)
    if not source.is_file():
        print(t("file_not_found", lang=args.lang, path=str(source)), file=sys.stderr)
        raise SystemExit(EC_INVALID_INPUT)

    try:
        wf = _build_workflow(args)
    except ConfigurationError as e:
        print(t("config_error", lang=args.lang, error=str(e)), file=sys.stderr)
        raise SystemExit(EC_CONFIG_ERROR)

    try:
        wf.read_path(source)
        wf.translate()
    except UnsupportedConstructError as e:
        print(t("unsupported_construct", lang=args.lang, error=str(e)), file=sys.stderr)
        raise SystemExit(EC_UNSUPPORTED)
    except ConfigurationError as e:
        print(t("config_error", lang=args.lang, error=str(e)), file=sys.stderr)
        raise SystemExit(EC_CONFIG_ERROR)
    except TranslationTransportError as e:
        print(t("translate_failed", lang=args.lang, error=str(e)), file=sys.stderr)
        raise SystemExit(EC_TRANSLATE_ERROR)
    finally:
        wf.close()

    try:
        wf.save_as_markdown(destination)
    except OSError as e:
        print(t("write_failed", lang=args.lang, path=str(destination), error=str(e)), file=sys.stderr)
        raise SystemExit(EC_OUTPUT_ERROR)
    print(t("generated", lang=args.lang, path=str(destination.resolve())))


if __name__ == "__main__":
    main()
