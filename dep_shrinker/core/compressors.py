"""Compression strategies for JavaScript and JSON files."""

import json
import logging
import os
import re
import shutil
import tempfile

from .models import FileAction, FileOutcome, OutcomeStatus
from ..utils.formatters import format_kilobytes


# Conservative textual check; files mentioning these words are never minified.
MODULE_SYNTAX_PATTERN = re.compile(r'import\s|export\s')


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


class BaseCompressor:
    """Reads a file, transforms it and writes it back only if it got smaller."""

    action = FileAction.SKIP

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def compress(self, path: str) -> FileOutcome:
        """Compress a file in place.

        Args:
            path: Path of the file to compress.

        Returns:
            FileOutcome describing the result. Per-file errors are logged and
            returned as FAILED outcomes instead of being raised.
        """
        self.logger.debug(f"Compressing {path}")

        try:
            original = self._read_text(path)
            compressed = self.transform(path, original)
            if compressed is None:
                return FileOutcome(path=path, action=self.action, status=OutcomeStatus.UNCHANGED)
            return self._write_if_smaller(path, original, compressed)
        except Exception as e:
            self.logger.error(f"Error compressing {path}: {e}")
            return FileOutcome.failed(path, self.action, e)

    def transform(self, path: str, text: str):
        """Return the compressed text, or None to leave the file alone."""
        raise NotImplementedError

    def _read_text(self, path: str) -> str:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()

    def _write_if_smaller(self, path: str, original: str, compressed: str) -> FileOutcome:
        bytes_before = len(original.encode('utf-8'))
        bytes_after = len(compressed.encode('utf-8'))

        if bytes_after >= bytes_before:
            self.logger.debug(f"Not smaller, leaving {path} unchanged ({bytes_after} >= {bytes_before} bytes)")
            return FileOutcome(path=path, action=self.action, status=OutcomeStatus.UNCHANGED,
                               bytes_before=bytes_before, bytes_after=bytes_before)

        self._replace_file(path, compressed)

        self.logger.info(f"Compressed {path} (saved {format_kilobytes(bytes_before - bytes_after)})")
        return FileOutcome(path=path, action=self.action, status=OutcomeStatus.APPLIED,
                           bytes_before=bytes_before, bytes_after=bytes_after)

    def _replace_file(self, path: str, content: str) -> None:
        """Write content next to the file, then swap it in.

        The original stays intact until the new content is fully written.
        """
        tmp = tempfile.NamedTemporaryFile('w', encoding='utf-8', newline='', delete=False,
                                          dir=os.path.dirname(path) or '.',
                                          prefix='.', suffix='.tmp')
        try:
            with tmp:
                tmp.write(content)
            shutil.copymode(path, tmp.name)
            os.replace(tmp.name, path)
        except BaseException:
            if os.path.exists(tmp.name):
                os.unlink(tmp.name)
            raise


class JsCompressor(BaseCompressor):
    """Minifies JavaScript files that do not use module syntax."""

    action = FileAction.COMPRESS_JS

    def __init__(self, minifier):
        """Initialize JavaScript compressor.

        Args:
            minifier: Object with a ``minify(code) -> str`` method.
        """
        super().__init__()
        self.minifier = minifier

    def transform(self, path: str, text: str):
        if MODULE_SYNTAX_PATTERN.search(text):
            self.logger.debug(f"Skipping {path}: contains import/export")
            return None
        return self.minifier.minify(text)


class JsonCompressor(BaseCompressor):
    """Re-serializes JSON files without insignificant whitespace."""

    action = FileAction.COMPRESS_JSON

    def transform(self, path: str, text: str):
        data = json.loads(text, parse_constant=_reject_constant)
        return json.dumps(data, separators=(',', ':'), ensure_ascii=False, allow_nan=False)
