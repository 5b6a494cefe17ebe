# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""DtsGen package.

DtsGen assembles the intermediate type-def records written while compiling a
native module into a public TypeScript declaration file (``index.d.ts``) and
the list of symbols it exports. It exposes both a CLI and a small typed API
for build scripts.
"""

from __future__ import annotations
