import sys

from smcalc.shell import main

sys.exit(main())
