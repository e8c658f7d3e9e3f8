"""File classification policy for dependency trees."""

import os

from .models import FileAction


DELETE_EXTENSIONS = frozenset(['.md', '.ts'])
JS_EXTENSION = '.js'
JSON_EXTENSION = '.json'

# Lint configuration, ignore and cache files. Matched against the lower-cased name.
LINT_ARTIFACT_NAMES = frozenset([
    '.eslintrc',
    '.eslintrc.js',
    '.eslintrc.json',
    '.eslintrc.yml',
    '.eslintrc.yaml',
    '.eslintrc.cjs',
    '.eslintrc.config.js',
    '.eslintrc.config.cjs',
    '.eslintrc.base.js',
    '.eslintrc.base.cjs',
    '.eslintrc.jsonc',
    '.eslintrc.ymlc',
    '.eslintrc.yamlc',
    '.eslintrc.toml',
    '.eslintrc.cjson',
    '.eslintrc.json5',
    '.eslintrc5',
    '.eslintignore',
    '.eslintcache',
    '.eslintresult',
])


def get_extension(name: str) -> str:
    """Return the final extension of a file name, or '' for none.

    Dot-files such as ``.eslintrc`` have no extension.
    """
    return os.path.splitext(name)[1]


def classify(name: str) -> FileAction:
    """Decide what to do with a file, based on its name only.

    Args:
        name: Base name of the file.

    Returns:
        The FileAction for the file.
    """
    extension = get_extension(name)

    if extension in DELETE_EXTENSIONS or name.lower() in LINT_ARTIFACT_NAMES:
        return FileAction.DELETE
    if extension == JS_EXTENSION:
        return FileAction.COMPRESS_JS
    if extension == JSON_EXTENSION:
        return FileAction.COMPRESS_JSON
    return FileAction.SKIP
