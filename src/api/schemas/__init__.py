# This file marks the schemas package for API response models.
# Employee request/response models live in `src.employees.schemas`.
