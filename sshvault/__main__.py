import sys

from sshvault.cli import main

sys.exit(main())
