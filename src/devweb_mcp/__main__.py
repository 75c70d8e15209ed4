import sys

from devweb_mcp.cli import main

sys.exit(main())
