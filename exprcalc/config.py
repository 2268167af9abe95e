"""Configuration management for the calculator."""
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Width of the signed integer range literals and results must fit in
INTEGER_BITS = int(os.getenv("INTEGER_BITS", "32"))
INTEGER_MIN = -(2 ** (INTEGER_BITS - 1))
INTEGER_MAX = 2 ** (INTEGER_BITS - 1) - 1

MAX_NESTING_DEPTH = int(os.getenv("MAX_NESTING_DEPTH", "256"))

SHOW_TRACE = os.getenv("SHOW_TRACE", "false").lower() in ("1", "true", "yes")
