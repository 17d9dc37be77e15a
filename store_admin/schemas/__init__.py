"""
Pydantic schemas package.

WHY: Request schemas accept the camelCase bodies the admin clients send;
response schemas control exactly which fields leave the API.
"""
