"""Read a line, ask the model, print the answer; repeat until 'exit'."""

from __future__ import annotations
import asyncio
import os
import sys
import threading
from typing import Optional, TextIO
from .completion import CompletionService

PROMPT = '\nEnter your question (or type "exit" to quit): '
SENTINEL = "exit"

class ReaderClosedError(RuntimeError):
    pass

class LineReader:
    """One line per ``ask``; the loop owns it and closes it on every exit path."""

    def __init__(self, stream: Optional[TextIO] = None, out: Optional[TextIO] = None):
        self.stream = stream or sys.stdin
        self.out = out or sys.stdout
        self.closed = False

    async def ask(self, question: str) -> str:
        if self.closed:
            raise ReaderClosedError("Line reader is closed")
        self.out.write(question)
        self.out.flush()
        line = await self._readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _blocking_readline(self) -> str:
        try:
            fileno = self.stream.fileno()
        except (AttributeError, OSError, ValueError):
            return self.stream.readline()
        # Raw fd reads hold no io buffer lock, so a reader still parked here
        # cannot deadlock interpreter shutdown.
        data = bytearray()
        while not data.endswith(b"\n"):
            chunk = os.read(fileno, 1)
            if not chunk:
                break
            data += chunk
        encoding = getattr(self.stream, "encoding", None) or "utf-8"
        return data.decode(encoding, errors="replace")

    def _readline(self) -> "asyncio.Future[str]":
        # A daemon thread, not the default executor: a read still blocked on
        # stdin must not keep the process alive after Ctrl-C.
        loop = asyncio.get_running_loop()
        fut: "asyncio.Future[str]" = loop.create_future()

        def settle(result: Optional[str], error: Optional[BaseException]) -> None:
            if fut.done():
                return
            if error is not None:
                fut.set_exception(error)
            else:
                fut.set_result(result)

        def read() -> None:
            try:
                line, error = self._blocking_readline(), None
            except Exception as e:
                line, error = None, e
            try:
                loop.call_soon_threadsafe(settle, line, error)
            except RuntimeError:
                # loop already closed; nobody is waiting for this line
                pass

        threading.Thread(target=read, name="line-reader", daemon=True).start()
        return fut

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "LineReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

async def run_prompt_loop(
    reader: LineReader,
    service: CompletionService,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Drive the loop. Returns 0 on 'exit' or EOF, 1 on the first failed call."""
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        while True:
            try:
                prompt = await reader.ask(PROMPT)
            except EOFError:
                prompt = SENTINEL

            if prompt.lower() == SENTINEL:
                print("Goodbye!", file=out)
                return 0

            print("\nThinking...", file=out, flush=True)
            text = await service.complete(prompt)
            print("\nResponse:", text, file=out)
    except Exception as e:
        print(f"Error: {str(e) or type(e).__name__}", file=err)
        return 1
    finally:
        reader.close()
