"""
Employee domain package: entities, repositories, DTOs, mapping, validation, and seed data.
"""
