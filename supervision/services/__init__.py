"""
Workflow services.

Services take the resolved caller and plain request values, enforce the
role and state rules, call the repositories, and return projected
dictionaries. Failures are raised as ServiceError subclasses.
"""
