import sys

from slack_client.cli import main

sys.exit(main())
