"""Shared test fixtures — sample diffs, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_diff_modified() -> str:
    """A single-file diff with one hunk."""
    return textwrap.dedent("""\
        diff --git a/src/main.rs b/src/main.rs
        index 1234567..abcdef0 100644
        --- a/src/main.rs
        +++ b/src/main.rs
        @@ -74,15 +75,14 @@ pub fn delta(
        -    let x = 1;
        +    let x = 2;
    """)


@pytest.fixture
def sample_diff_multi_file() -> str:
    """Modified, extensionless and renamed files, four hunks in total."""
    return textwrap.dedent("""\
        diff --git a/src/main.rs b/src/main.rs
        index 1234567..abcdef0 100644
        --- a/src/main.rs
        +++ b/src/main.rs
        @@ -74,15 +75,14 @@ pub fn delta(
        -    let x = 1;
        +    let x = 2;
        @@ -120,3 +119,4 @@ fn paint(
        +    paint();
        diff --git a/Makefile b/Makefile
        index 1111111..2222222 100644
        --- a/Makefile
        +++ b/Makefile
        @@ -1,2 +1,3 @@ all:
        +    cargo build
        diff --git a/docs/README b/docs/README.md
        similarity index 90%
        rename from docs/README
        rename to docs/README.md
        @@ -3,1 +3,1 @@
        -old
        +new
    """)


@pytest.fixture
def sample_diff_new_file() -> str:
    """A diff adding a file; git still names it on both sides of the header."""
    return textwrap.dedent("""\
        diff --git a/hello.py b/hello.py
        new file mode 100644
        index 0000000..e69de29
        --- /dev/null
        +++ b/hello.py
        @@ -0,0 +1,3 @@
        +def greet(name):
        +    return f"Hello, {name}!"
        +
    """)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
