"""Personnel console package.

Organized by feature modules (employees, attendance, reviews, insights, overview)
on top of a single in-process entity store, with a thin Flask controller layer.
"""
