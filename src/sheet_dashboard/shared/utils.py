"""Shared utility functions"""
from datetime import datetime


def formated_datetime(now: datetime) -> str:
    """Format datetime to string"""
    formatted_date = now.strftime("%d/%m/%Y %H:%M:%S")
    return formatted_date
