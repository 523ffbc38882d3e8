from noaa_weather.CLI import main


if __name__ == "__main__":
    raise SystemExit(main())
