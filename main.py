import sys

from tictactoe_ai.app import main

if __name__ == '__main__':
    sys.exit(main())
