"""Starter .diffmeta.toml template."""

DEFAULT_TOML = """\
# diffmeta configuration
version = "1.0"

[output]
format = "terminal"       # terminal | json
show_summary = true

[display]
file_headers = true
hunk_headers = true
highlight = true          # syntax-highlight hunk code fragments
theme = "monokai"

[syntax]
# Map extension tokens (or bare file names) to highlighter languages.
# aliases = { "rs" = "rust", "Justfile" = "make" }
"""
