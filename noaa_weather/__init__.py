"""Клиент NOAA / National Weather Service API и утилита командной строки."""

__version__ = "0.1.0"
