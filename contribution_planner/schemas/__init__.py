"""Pydantic data contracts shared by the calculation layer and the API."""
