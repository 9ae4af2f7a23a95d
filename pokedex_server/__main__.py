import sys

from pokedex_server.cli import main

sys.exit(main())
