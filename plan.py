# File: plan.py
#
# Run this file once a week (cron, CI schedule) to fill next week's calendar.
# Make sure you have run 'scripts/setup.py' at least once.

import sys

from notion_scheduler.main import main

if __name__ == "__main__":
    sys.exit(main())
