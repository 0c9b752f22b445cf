# main.py - entry point for the interactive suggestion prompt
# usage: python main.py [--corpus res/messages.txt] [--config config.json] [--log-level INFO]

import sys

from word_suggestion.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
