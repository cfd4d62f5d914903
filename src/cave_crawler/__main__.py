import sys

from cave_crawler.cli import main


sys.exit(main())
