"""diffmeta — metadata for the header lines of unified diffs."""

__version__ = "0.1.0"
