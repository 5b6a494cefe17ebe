# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Click-based command-line interface for DtsGen."""
