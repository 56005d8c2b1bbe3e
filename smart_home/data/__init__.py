"""Sample data and fixtures."""

from smart_home.data.sample_house import create_sample_house

__all__ = ["create_sample_house"]
