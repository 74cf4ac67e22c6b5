from workday_time.time_value import InvalidInput, Time, parse_hhmm, parse_loose

__version__ = "0.1.0"

__all__ = ["InvalidInput", "Time", "parse_hhmm", "parse_loose", "__version__"]
