"""Tests for the JavaScript and JSON compressors."""

import json
import logging
import os

import pytest

from dep_shrinker.core.compressors import JsCompressor, JsonCompressor
from dep_shrinker.core.models import FileAction, OutcomeStatus

from conftest import FailingMinifier, FakeMinifier


class IdentityMinifier:
    def minify(self, code):
        return code


class GrowingMinifier:
    def minify(self, code):
        return '"use strict";' + code


def test_js_file_rewritten_when_smaller(tmp_path, fake_minifier):
    path = tmp_path / 'util.js'
    path.write_text('function f(a,b){return a+b;}', encoding='utf-8')

    outcome = JsCompressor(fake_minifier).compress(str(path))

    assert outcome.status is OutcomeStatus.APPLIED
    assert outcome.action is FileAction.COMPRESS_JS
    assert path.read_text(encoding='utf-8') == 'function f(a,b){return a+b}'
    assert outcome.bytes_before == 28
    assert outcome.bytes_after == 27
    assert outcome.bytes_reclaimed == 1


def test_js_with_module_syntax_is_not_minified(tmp_path, fake_minifier):
    for name, source in [('a.js', 'export const x=1;'), ('b.js', "import fs from 'fs';\nfs.x();")]:
        path = tmp_path / name
        path.write_text(source, encoding='utf-8')

        outcome = JsCompressor(fake_minifier).compress(str(path))

        assert outcome.status is OutcomeStatus.UNCHANGED
        assert path.read_text(encoding='utf-8') == source

    assert fake_minifier.calls == []


def test_module_check_is_textual(tmp_path, fake_minifier):
    path = tmp_path / 'c.js'
    source = "var msg = 'please export data';"
    path.write_text(source, encoding='utf-8')

    outcome = JsCompressor(fake_minifier).compress(str(path))

    assert outcome.status is OutcomeStatus.UNCHANGED
    assert path.read_text(encoding='utf-8') == source


def test_js_left_alone_when_not_smaller(tmp_path):
    source = 'var a=1;'
    for minifier in (IdentityMinifier(), GrowingMinifier()):
        path = tmp_path / 'same.js'
        path.write_text(source, encoding='utf-8')

        outcome = JsCompressor(minifier).compress(str(path))

        assert outcome.status is OutcomeStatus.UNCHANGED
        assert path.read_text(encoding='utf-8') == source


def test_minifier_error_is_recoverable(tmp_path, caplog):
    path = tmp_path / 'broken.js'
    path.write_text('function (', encoding='utf-8')

    with caplog.at_level(logging.ERROR):
        outcome = JsCompressor(FailingMinifier()).compress(str(path))

    assert outcome.status is OutcomeStatus.FAILED
    assert 'unexpected token' in outcome.error
    assert path.read_text(encoding='utf-8') == 'function ('
    assert str(path) in caplog.text


def test_missing_file_is_recoverable(tmp_path, fake_minifier):
    outcome = JsCompressor(fake_minifier).compress(str(tmp_path / 'gone.js'))

    assert outcome.status is OutcomeStatus.FAILED
    assert outcome.error


def test_json_is_compacted_and_round_trips(tmp_path):
    data = {'name': 'pkg', 'nested': {'list': [1, 2.5, None, True], 'text': 'héllo / "q"'}}
    path = tmp_path / 'package.json'
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding='utf-8')
    before = path.stat().st_size

    outcome = JsonCompressor().compress(str(path))

    assert outcome.status is OutcomeStatus.APPLIED
    assert outcome.action is FileAction.COMPRESS_JSON
    compacted = path.read_text(encoding='utf-8')
    assert json.loads(compacted) == data
    assert 'héllo' in compacted
    assert ', ' not in compacted.replace('héllo / "q"', '')
    assert outcome.bytes_before == before
    assert outcome.bytes_after == path.stat().st_size


def test_compact_json_is_not_recounted(tmp_path):
    path = tmp_path / 'data.json'
    path.write_text('{\n  "a": [1, 2]\n}\n', encoding='utf-8')
    compressor = JsonCompressor()

    first = compressor.compress(str(path))
    content = path.read_bytes()
    second = compressor.compress(str(path))

    assert first.status is OutcomeStatus.APPLIED
    assert second.status is OutcomeStatus.UNCHANGED
    assert path.read_bytes() == content


def test_malformed_json_is_left_untouched(tmp_path, caplog):
    path = tmp_path / 'bad.json'
    source = '{"a": 1,, }'
    path.write_text(source, encoding='utf-8')

    with caplog.at_level(logging.ERROR):
        outcome = JsonCompressor().compress(str(path))

    assert outcome.status is OutcomeStatus.FAILED
    assert path.read_text(encoding='utf-8') == source
    assert 'bad.json' in caplog.text


def test_json_rejects_non_standard_constants(tmp_path):
    path = tmp_path / 'nan.json'
    source = '{ "value": NaN }'
    path.write_text(source, encoding='utf-8')

    outcome = JsonCompressor().compress(str(path))

    assert outcome.status is OutcomeStatus.FAILED
    assert path.read_text(encoding='utf-8') == source


def test_overflowing_json_number_is_left_untouched(tmp_path):
    path = tmp_path / 'package.json'
    source = '{\n    "big": 1e400,\n    "n": 1\n}'
    path.write_text(source, encoding='utf-8')

    outcome = JsonCompressor().compress(str(path))

    assert outcome.status is OutcomeStatus.FAILED
    assert path.read_text(encoding='utf-8') == source


def test_failed_write_keeps_original_bytes(tmp_path, monkeypatch):
    path = tmp_path / 'data.json'
    path.write_text(json.dumps({'k%d' % i: 'v' * 50 for i in range(40)}, indent=4), encoding='utf-8')
    original = path.read_bytes()

    def disk_full(src, dst):
        raise OSError(27, 'File too large')

    monkeypatch.setattr(os, 'replace', disk_full)

    outcome = JsonCompressor().compress(str(path))

    assert outcome.status is OutcomeStatus.FAILED
    assert 'File too large' in outcome.error
    assert path.read_bytes() == original
    assert sorted(p.name for p in tmp_path.iterdir()) == ['data.json']


def test_rewrite_keeps_file_mode(tmp_path):
    path = tmp_path / 'cli.js'
    path.write_text('function f(a,b){return a+b;}', encoding='utf-8')
    os.chmod(str(path), 0o755)

    outcome = JsCompressor(FakeMinifier()).compress(str(path))

    assert outcome.status is OutcomeStatus.APPLIED
    assert os.stat(str(path)).st_mode & 0o777 == 0o755


@pytest.mark.parametrize('source', [
    'function f(a,b){return a+b;}',
    'var total = 1;\nfunction add(x) { return total + x; }\n',
])
def test_minified_js_is_not_recounted(tmp_path, fake_minifier, source):
    path = tmp_path / 'lib.js'
    path.write_text(source, encoding='utf-8')
    compressor = JsCompressor(fake_minifier)

    first = compressor.compress(str(path))
    content = path.read_bytes()
    second = compressor.compress(str(path))

    assert first.status is OutcomeStatus.APPLIED
    assert second.status is OutcomeStatus.UNCHANGED
    assert path.read_bytes() == content
