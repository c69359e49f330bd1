"""Stream a literate file from stdin to stdout.

Usage:
    python examples/streaming/stdin_to_stdout.py go < main.go > main.md
"""

import sys

from lit2md import ConvertConfig, convert_lines, language_for_extension

ext = sys.argv[1] if len(sys.argv) > 1 else "go"
config = ConvertConfig.for_language(language_for_extension(ext))
convert_lines(sys.stdin, sys.stdout, config)
