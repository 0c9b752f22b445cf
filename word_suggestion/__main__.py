import sys

from word_suggestion.cli.cli import main

sys.exit(main())
