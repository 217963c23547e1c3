"""Workforce Payroll package.

Feature modules (checkin, timesheets, payroll, ...) each carry their own
domain model, repository interface, MySQL repository and service, with a
thin Flask controller layer on top.
"""
