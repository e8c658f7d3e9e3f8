"""
Shared fixtures for dependency shrinker tests.

Provides a stand-in minifier and a small installed dependency tree so the
walker and compressors can be exercised without node or terser.
"""

import json
import re
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from dep_shrinker.config.config_manager import ConfigManager  # noqa: E402
from dep_shrinker.core.compressors import JsCompressor, JsonCompressor  # noqa: E402
from dep_shrinker.core.walker import TreeWalker  # noqa: E402


class FakeMinifier:
    """Drops the semicolon before a closing brace and surrounding whitespace."""

    def __init__(self):
        self.calls = []

    def minify(self, code):
        self.calls.append(code)
        return re.sub(r';\s*}', '}', code).strip()


class FailingMinifier:
    def minify(self, code):
        raise RuntimeError("unexpected token")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep ConfigManager away from config files outside the test directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(ConfigManager, 'DEFAULT_CONFIG_LOCATIONS', ['dep-shrinker.yaml'])


@pytest.fixture
def fake_minifier():
    return FakeMinifier()


@pytest.fixture
def walker(fake_minifier):
    return TreeWalker(js_compressor=JsCompressor(fake_minifier), json_compressor=JsonCompressor())


@pytest.fixture
def sample_tree(tmp_path):
    """A package directory mixing files to delete, compress and keep."""
    root = tmp_path / 'node_modules'
    root.mkdir()

    (root / 'readme.md').write_text('# Readme\n' + 'x' * 2048, encoding='utf-8')
    (root / 'foo.ts').write_text('export type Foo = string;\n' + '/' * 1024, encoding='utf-8')
    (root / '.eslintrc.json').write_text('{"rules": {}}' + ' ' * 500, encoding='utf-8')
    (root / 'index.js').write_text('export const x=1;', encoding='utf-8')
    (root / 'util.js').write_text('function f(a,b){return a+b;}', encoding='utf-8')
    (root / 'data.json').write_text(json.dumps({'name': 'pkg', 'values': [1, 2, 3]}, indent=4),
                                    encoding='utf-8')
    return root
