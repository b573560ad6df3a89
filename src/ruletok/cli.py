"""CLI entrypoint for ruletok."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ruletok.config import AppConfig, load_config
from ruletok.core import annotate, process
from ruletok.eval import evaluate, load_reference_tokens
from ruletok.io import decode_text, read_text, to_json, write_output
from ruletok.languages import supported_languages
from ruletok.models import ProcessingConfig
from ruletok.server import send_document, serve_forever
from ruletok.tokenize import NORMALIZATION_PROFILES, SEGMENTATION_POLICIES


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="ruletok",
        description="Rule-based multilingual tokenizer and sentence segmenter.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print the parsed options to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    tok = subparsers.add_parser("tok", help="Tokenize text")
    tok.add_argument("input", nargs="?", default="-", help="Input text path (default: stdin)")
    _add_processing_arguments(tok)
    tok.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output path. If omitted, prints to stdout.",
    )

    evaluate_cmd = subparsers.add_parser(
        "eval",
        help="Evaluate tokenization of a text against a reference tokenization",
    )
    evaluate_cmd.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input text path (default: stdin)",
    )
    evaluate_cmd.add_argument("-r", "--reference", required=True, help="Reference token file")
    evaluate_cmd.add_argument(
        "-i",
        "--input-format",
        choices=["tokenline", "sentenceline"],
        default="tokenline",
        help="Reference file format (default: tokenline)",
    )
    evaluate_cmd.add_argument(
        "--window",
        type=int,
        default=None,
        help="Resynchronization lookahead window (default: from config)",
    )
    _add_processing_arguments(evaluate_cmd, with_output=False)

    server = subparsers.add_parser("server", help="Start the TCP socket server")
    _add_processing_arguments(server)
    server.add_argument("--host", default=None, help="Override TCP host")
    server.add_argument("-p", "--port", type=int, default=None, help="Override TCP port")

    client = subparsers.add_parser("client", help="Send a document to the TCP socket server")
    client.add_argument("input", nargs="?", default="-", help="Input text path (default: stdin)")
    client.add_argument("--host", default=None, help="Server host")
    client.add_argument("-p", "--port", type=int, default=None, help="Server port")

    serve = subparsers.add_parser("serve", help="Run the ruletok HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def _add_processing_arguments(parser: argparse.ArgumentParser, *, with_output: bool = True) -> None:
    parser.add_argument(
        "-l",
        "--lang",
        required=True,
        help=f"Language tag, one of: {', '.join(supported_languages())}",
    )
    parser.add_argument(
        "-n",
        "--normalize",
        choices=NORMALIZATION_PROFILES,
        default="default",
        help="Corpus normalization profile (default: no escaping)",
    )
    parser.add_argument(
        "-u",
        "--untokenizable",
        choices=["report", "suppress"],
        default="suppress",
        help="Report untokenizable characters as tokens or suppress them",
    )
    parser.add_argument(
        "--segment-on-linebreak",
        choices=SEGMENTATION_POLICIES,
        default="none",
        help="Start a new sentence after single or double linebreaks",
    )
    parser.add_argument(
        "--notok",
        action="store_true",
        help="Input is already tokenized, one sentence per line",
    )
    if not with_output:
        return
    parser.add_argument(
        "-f",
        "--output-format",
        choices=["plain", "tabular", "oneline", "structured"],
        default="structured",
        help="Output format (default: structured JSON)",
    )
    parser.add_argument(
        "--no-offsets",
        action="store_true",
        help="Omit offset and length columns in tabular output",
    )


def _processing_config(args: argparse.Namespace) -> ProcessingConfig:
    return ProcessingConfig(
        language=args.lang,
        normalization=args.normalize,
        untokenizable=args.untokenizable,
        segment_on_linebreak=args.segment_on_linebreak,
        output_format=getattr(args, "output_format", "structured"),
        offsets=not getattr(args, "no_offsets", False),
        pretokenized=args.notok,
    )


def _read_input(path: str) -> str:
    if path == "-":
        return decode_text(sys.stdin.buffer.read())
    return read_text(path)


def _emit(text: str) -> None:
    sys.stdout.write(text)
    if text and not text.endswith("\n"):
        sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.verbose:
        print(f"CLI options: {vars(args)}", file=sys.stderr)

    try:
        return _run(parser, args, config)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace, config: AppConfig) -> int:
    if args.command == "tok":
        output = process(_read_input(args.input), _processing_config(args))
        if args.output:
            write_output(output, args.output)
            print(f"Wrote {args.output_format} output to {args.output}")
            return 0
        _emit(output)
        return 0

    if args.command == "eval":
        document = annotate(_read_input(args.input), _processing_config(args))
        hypothesis = [token.surface for token in document.tokens]
        reference = load_reference_tokens(args.reference, args.input_format)
        window = config.eval_window if args.window is None else args.window
        result = evaluate(reference, hypothesis, window=window)
        print(to_json(result))
        return 0

    if args.command == "server":
        serve_forever(
            _processing_config(args),
            host=args.host or config.tcp_host,
            port=args.port or config.tcp_port,
        )
        return 0

    if args.command == "client":
        response = send_document(
            _read_input(args.input),
            host=args.host or config.tcp_host,
            port=args.port or config.tcp_port,
        )
        _emit(response)
        return 0

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`ruletok serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        uvicorn.run(
            "ruletok.api:app",
            host=args.host or config.api_host,
            port=args.port or config.api_port,
            workers=config.workers,
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
