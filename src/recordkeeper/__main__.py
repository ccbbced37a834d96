"""Run the records job: python -m recordkeeper --verify."""

import sys

from recordkeeper.interfaces.cli.records_job import main

sys.exit(main())
