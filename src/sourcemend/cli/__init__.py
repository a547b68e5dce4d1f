# topmark:header:start
#
#   project      : SourceMend
#   file         : __init__.py
#   file_relpath : src/sourcemend/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for SourceMend (Click-based)."""
