import sys

from noaa_weather.CLI import main

sys.exit(main())
