"""External process execution with live, captured output.

The child's stdout and stderr are relayed to the invoking process as they
arrive while a copy of every byte is kept for diagnostics.
"""
import os
import subprocess
import sys
import threading
from dataclasses import dataclass
from typing import BinaryIO, Dict, List, Optional

from tcdev.core.logger import get_logger

logger = get_logger(__name__)

_CHUNK_SIZE = 32 * 1024


class CapturingPassThroughWriter:
    """Writer that remembers data written to it and passes it to ``dest``."""

    def __init__(self, dest: BinaryIO):
        self._buf = bytearray()
        self._dest = dest

    def write(self, data: bytes) -> Optional[int]:
        self._buf.extend(data)
        return self._dest.write(data)

    def flush(self) -> None:
        flush = getattr(self._dest, "flush", None)
        if flush is not None:
            flush()

    def bytes(self) -> bytes:
        """Return every byte written so far."""
        return bytes(self._buf)


class ProcessExitError(Exception):
    """The process ran but exited with a non-zero status or was killed."""

    def __init__(self, returncode: int):
        self.returncode = returncode
        if returncode < 0:
            message = f"signal: {-returncode}"
        else:
            message = f"exit status {returncode}"
        super().__init__(message)


@dataclass
class ExecResult:
    """Outcome of one external process invocation.

    Attributes:
        error: Start failure or abnormal exit of the process
        stdout_error: Failure while relaying stdout
        stderr_error: Failure while relaying stderr
        stdout: Captured stdout bytes
        stderr: Captured stderr bytes
    """

    error: Optional[BaseException] = None
    stdout_error: Optional[BaseException] = None
    stderr_error: Optional[BaseException] = None
    stdout: bytes = b""
    stderr: bytes = b""


def _binary_stream(stream) -> BinaryIO:
    return getattr(stream, "buffer", stream)


class _StreamCopier(threading.Thread):
    """Drains one pipe of the child into a writer."""

    def __init__(self, source: BinaryIO, writer: CapturingPassThroughWriter, name: str):
        super().__init__(name=name, daemon=True)
        self.source = source
        self.writer = writer
        self.error: Optional[BaseException] = None

    def run(self) -> None:
        try:
            while True:
                chunk = self.source.read1(_CHUNK_SIZE)
                if not chunk:
                    break
                if self.error is not None:
                    # keep draining so the child never writes into a closed pipe
                    continue
                try:
                    self.writer.write(chunk)
                    self.writer.flush()
                except (OSError, ValueError) as e:
                    self.error = e
        except (OSError, ValueError) as e:
            self.error = self.error or e
        finally:
            self.source.close()


def execute(
    dir_context: str,
    environment: Dict[str, str],
    binary: str,
    args: List[str],
    stdout: Optional[BinaryIO] = None,
    stderr: Optional[BinaryIO] = None,
) -> ExecResult:
    """Run ``binary`` with ``args`` inside ``dir_context`` and wait for it.

    Args:
        dir_context: Working directory for the process
        environment: Variables overlaid on top of the current environment
        binary: Executable name (looked up on PATH) or path
        args: Arguments passed after the binary
        stdout: Where to relay the child's stdout (defaults to our stdout)
        stderr: Where to relay the child's stderr (defaults to our stderr)

    Returns:
        ExecResult; failures are reported in its fields, never raised
    """
    env = dict(os.environ)
    env.update(environment)

    logger.debug(f"Running {binary} {' '.join(args)} in {dir_context}")

    try:
        proc = subprocess.Popen(
            [binary, *args],
            cwd=dir_context,
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        return ExecResult(error=e)

    if stdout is None:
        stdout = _binary_stream(sys.stdout)
    if stderr is None:
        stderr = _binary_stream(sys.stderr)

    out_writer = CapturingPassThroughWriter(stdout)
    err_writer = CapturingPassThroughWriter(stderr)

    out_copier = _StreamCopier(proc.stdout, out_writer, name=f"{binary}-stdout")
    err_copier = _StreamCopier(proc.stderr, err_writer, name=f"{binary}-stderr")
    out_copier.start()
    err_copier.start()

    error: Optional[BaseException] = None
    try:
        returncode = proc.wait()
    except OSError as e:
        error = e
    else:
        if returncode != 0:
            error = ProcessExitError(returncode)

    out_copier.join()
    err_copier.join()

    return ExecResult(
        error=error,
        stdout_error=out_copier.error,
        stderr_error=err_copier.error,
        stdout=out_writer.bytes(),
        stderr=err_writer.bytes(),
    )

