"""An embosser that runs a local text-extraction program."""

from __future__ import annotations

import json
import os
import shutil
import subprocess
import tempfile
from typing import IO
from urllib.parse import urlsplit

from textemboss.emboss import Embosser, EmbosserError, EmbossTextResult


class LocalEmbosser(Embosser):
    """Extracts text by running the program named in the URI's path.

    The program is called as ``<program> --as-json true <image>`` and must
    print a JSON object with ``text``, ``source`` and ``created`` keys.
    """

    def __init__(self, uri: str) -> None:
        try:
            program = urlsplit(uri).path
        except ValueError as err:
            raise EmbosserError(f"Failed to parse URI, {err}") from err
        try:
            os.stat(program)
        except OSError as err:
            raise EmbosserError(f"Failed to stat {program}, {err}") from err
        self.program = program

    def emboss_text(self, path: str) -> EmbossTextResult:
        try:
            completed = subprocess.run(
                [self.program, "--as-json", "true", path],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as err:
            raise EmbosserError(f"Failed to extract text, {err}") from err

        try:
            data = json.loads(completed.stdout)
        except ValueError as err:
            raise EmbosserError(f"Failed to unmarshal response, {err}") from err
        return EmbossTextResult.from_dict(data)

    def emboss_text_with_reader(self, path: str, reader: IO[bytes]) -> EmbossTextResult:
        if path:
            try:
                fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
            except OSError as err:
                raise EmbosserError(f"Failed to open {path} for writing, {err}") from err
        else:
            try:
                fd, path = tempfile.mkstemp(prefix="emboss")
            except OSError as err:
                raise EmbosserError(
                    f"Failed to create temp file for writing reader, {err}"
                ) from err

        try:
            try:
                with os.fdopen(fd, "wb") as out:
                    shutil.copyfileobj(reader, out)
            except OSError as err:
                raise EmbosserError(f"Failed to copy reader to {path}, {err}") from err
            return self.emboss_text(path)
        finally:
            try:
                os.remove(path)
            except OSError:
                pass

    def close(self) -> None:
        return None