import sys

from weatherapp.main import main

sys.exit(main())
