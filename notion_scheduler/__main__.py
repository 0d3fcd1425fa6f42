import sys

from notion_scheduler.main import main

sys.exit(main())
