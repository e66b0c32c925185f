"""
calorie-insights: tolerant decoding and reporting for food-consumption JSON.
"""

__version__ = "0.1.0"
