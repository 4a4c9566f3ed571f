import sys

from pgx_new.cli import main

sys.exit(main())
