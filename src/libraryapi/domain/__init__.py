"""
Domain layer - business records and rules.

This package contains:
- Models: Book, Loan and pagination records
- Errors: Business rule and contract violations
- Result: Ok/Err values returned by the rule components
"""
