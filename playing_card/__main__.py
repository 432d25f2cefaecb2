import sys

from playing_card.ui.cli.deck_demo import main

if __name__ == "__main__":
    sys.exit(main())
