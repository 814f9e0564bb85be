# src/lmquery/cli.py
# =============================================================
# lmquery CLI
# -------------------------------------------------------------
# One question, one answer:
#   resolve context source -> assemble -> truncate -> build payload
#   -> probe server -> POST /v1/chat/completions -> print answer
#
# Examples:
#   lmquery "What does this script do?" --file deploy.ps1
#   lmquery "Summarize" -c "first note" -c "second note"
#   cat rows.json | lmquery "Which row is odd?" --context-json -
# =============================================================

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .context import assemble_context, resolve_context_source, truncate_to_budget
from .errors import InvalidArguments, LMQueryError
from .formatter import format_response, format_usage
from .generate import EchoDevClient, LMStudioClient, build_payload
from .log import get_logger
from .settings import Settings, load_settings


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {n}")
    return n


def parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="lmquery",
        description="Send a question (plus optional context) to a local language-model server.",
    )
    p.add_argument("query", help="The question to ask.")
    p.add_argument("-c", "--context", action="append", metavar="TEXT",
                   help="Inline context line. Repeat for several lines.")
    p.add_argument("--context-json", metavar="JSON",
                   help="Structured context as JSON (array = several items). Use '-' to read stdin.")
    p.add_argument("-f", "--file", help="Read context from a text file.")
    p.add_argument("-d", "--developer", action="store_true", help="Print the raw response payload.")
    p.add_argument("-u", "--usage", action="store_true", help="Print token usage after the answer.")
    p.add_argument("-v", "--verbose", action="store_true", default=None, help="Show diagnostic log lines.")
    p.add_argument("--log-file", help="Append log lines to this file.")
    p.add_argument("--max-tokens", type=_positive_int, help="Context budget in tokens (~4 chars each). Default 100000.")
    p.add_argument("--host", help="Server host. Default localhost.")
    p.add_argument("--port", type=_positive_int, help="Server port. Default 1234.")
    p.add_argument("--model", help="Model name sent in the request. Default local-model.")
    p.add_argument("--config", help="YAML file with settings (HOST, PORT, MODEL, MAX_TOKENS, ...).")
    p.add_argument("--dry-run", action="store_true", help="Use the offline echo client; no server needed.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)


def run(args: argparse.Namespace, settings: Settings, logger: logging.Logger, client=None) -> int:
    """Execute the pipeline for parsed args. Raises LMQueryError on abort."""
    source = resolve_context_source(args.context, args.context_json, args.file)
    logger.debug("Context source: %s", type(source).__name__)

    context = assemble_context(source, escape=settings.ESCAPE_INTERPOLATION, logger=logger)
    if context is not None:
        context = truncate_to_budget(context, settings.MAX_TOKENS, logger=logger)

    payload = build_payload(args.query, context, model=settings.MODEL)
    logger.debug("Request body: %d characters", len(payload.to_json()))

    if client is None:
        if args.dry_run:
            client = EchoDevClient()
        else:
            client = LMStudioClient(settings.base_url, timeout=settings.REQUEST_TIMEOUT, logger=logger)

    client.probe(timeout=settings.PROBE_TIMEOUT)
    logger.debug("Sending query to %s", getattr(client, "base_url", "echo-dev"))
    raw = client.chat(payload)
    logger.debug("Response received")

    out = format_response(raw, developer=args.developer, logger=logger)
    print(out)
    logger.debug("Answer: %s", out)

    if args.usage:
        line = format_usage(raw)
        if line:
            print(line)
            logger.debug(line)
        else:
            logger.info("No usage information in response.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(
            args.config,
            host=args.host,
            port=args.port,
            model=args.model,
            max_tokens=args.max_tokens,
            log_file=args.log_file,
            verbose=args.verbose,
        )
    except InvalidArguments as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    try:
        logger = get_logger(verbose=settings.VERBOSE, log_file=settings.LOG_FILE)
    except OSError as e:
        print(f"Error: cannot open log file {settings.LOG_FILE}: {e}", file=sys.stderr)
        return InvalidArguments.exit_code

    try:
        return run(args, settings, logger)
    except LMQueryError as e:
        logger.error("Error: %s", e)
        return e.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
