"""
Ride Fare Model
===============
Entry point. Run with: python main.py
"""

import sys

from ridefare.demo import main

if __name__ == "__main__":
    sys.exit(main())
