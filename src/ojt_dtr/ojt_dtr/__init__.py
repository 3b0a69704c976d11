"""OJT Daily Time Record package.

Organized by feature modules (students, timelogs, timekeeping, progress)
with a thin Flask controller layer over service/repository layers.
The timekeeping and progress engines are pure functions over domain values.
"""
