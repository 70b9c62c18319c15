import sys

from carworks.demo import main

sys.exit(main())
