"""Built-in extension → language mappings (Pygments lexer aliases)."""

from diffmeta.syntax.models import SyntaxMapping

_BUILTIN: dict[str, str] = {
    "c": "c",
    "h": "c",
    "cc": "cpp",
    "cpp": "cpp",
    "hpp": "cpp",
    "cs": "csharp",
    "css": "css",
    "go": "go",
    "html": "html",
    "java": "java",
    "js": "javascript",
    "json": "json",
    "kt": "kotlin",
    "lua": "lua",
    "md": "markdown",
    "py": "python",
    "rb": "ruby",
    "rs": "rust",
    "sh": "bash",
    "sql": "sql",
    "swift": "swift",
    "toml": "toml",
    "ts": "typescript",
    "xml": "xml",
    "yaml": "yaml",
    "yml": "yaml",
    # File names standing in for an extension
    "Makefile": "make",
    "makefile": "make",
    "Dockerfile": "docker",
    ".bashrc": "bash",
}

ALL_BUILTIN_MAPPINGS: list[SyntaxMapping] = [
    SyntaxMapping(extension=ext, language=lang) for ext, lang in _BUILTIN.items()
]

__all__ = ["ALL_BUILTIN_MAPPINGS"]
