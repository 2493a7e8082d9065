"""Interactive terminal chat against the Gemini generateContent API.

Reads a line, sends it as a single-turn request, prints the first
candidate's text. No history is kept between turns.
"""
from __future__ import annotations
import argparse
import logging
import sys
import time
from contextlib import AbstractContextManager
from typing import Callable, Protocol, TextIO

import yaml
from rich.console import Console

from gemini_chat.client.gemini_client import GeminiClient
from gemini_chat.common.config import load_settings
from gemini_chat.common.errors import ChatError, MissingApiKeyError
from gemini_chat.common.formatting import render_reply
from gemini_chat.common.logging_setup import setup_logging
from gemini_chat.common.schema import GenerateContentResponse

LOGGER = logging.getLogger("gemini_chat.cli")

PROMPT = "> "

ProgressFactory = Callable[[], AbstractContextManager]


class ReplyGenerator(Protocol):
    def generate(self, text: str) -> GenerateContentResponse:
        ...


def thinking_indicator(console: Console) -> ProgressFactory:
    """Spinner shown while a request is in flight; stops when the block exits."""
    def _status() -> AbstractContextManager:
        return console.status("\t\tI'm thinking", spinner="dots9")
    return _status


def run_chat(
    client: ReplyGenerator,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    progress: ProgressFactory | None = None,
) -> int:
    """
    Prompt/answer loop. Returns 0 once stdin reaches end of input.

    Any ChatError during a turn, or an undecodable input line, is logged and
    the loop prompts again. Nothing is logged while the spinner is running.

    Args:
        client: Anything with `generate(text) -> GenerateContentResponse`.
        stdin: Input stream (defaults to sys.stdin).
        stdout: Output stream (defaults to sys.stdout).
        progress: Factory for the "thinking" context manager.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    progress = progress or thinking_indicator(Console(stderr=True))

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        try:
            line = stdin.readline()
        except UnicodeDecodeError as e:
            LOGGER.error("Error reading input: %s", e)
            continue
        if line == "":
            stdout.write("\n")
            stdout.flush()
            return 0

        text = line.strip()
        if not text:
            continue

        error: ChatError | None = None
        response: GenerateContentResponse | None = None
        reply = ""
        start = time.time()
        with progress():
            try:
                response = client.generate(text)
                reply = render_reply(response.first_text())
            except ChatError as e:
                error = e
        latency_ms = int((time.time() - start) * 1000)

        if error is not None:
            LOGGER.error("%s", error)
            continue
        usage = response.usage_metadata
        LOGGER.debug(
            "Latency: %sms | in=%s out=%s total=%s",
            latency_ms,
            usage.prompt_token_count,
            usage.candidates_token_count,
            usage.total_token_count,
        )
        stdout.write(reply)
        stdout.flush()


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="gemini-chat", description="Chat with Gemini from the terminal")
    ap.add_argument("--cfg", default=None, help="Optional YAML config path")
    ap.add_argument("--log-level", default=None, help="Override log level (e.g. DEBUG)")
    args = ap.parse_args(argv)

    setup_logging(args.log_level or logging.WARNING)
    try:
        settings = load_settings(args.cfg)
    except MissingApiKeyError as e:
        LOGGER.error("Error: %s", e)
        return 0
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        LOGGER.error("Invalid configuration: %s", e)
        return 2
    setup_logging(args.log_level or settings.log_level)
    LOGGER.info("Using endpoint %s", settings.endpoint)

    with GeminiClient.from_settings(settings) as client:
        try:
            return run_chat(client)
        except KeyboardInterrupt:
            sys.stdout.write("\n")
            return 130


if __name__ == "__main__":
    raise SystemExit(main())
