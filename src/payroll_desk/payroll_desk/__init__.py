"""Payroll Desk package.

This package is organized by feature modules (employees, attendance, breaks,
leaves, payroll, ...) with a thin Flask controller layer and SOLID
service/repository layers.
"""
